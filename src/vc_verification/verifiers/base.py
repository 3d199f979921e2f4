"""
Verifier capability contract.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from vc_verification.response import VerificationResult, build_verifier_response


INVALID_CREDENTIAL_MESSAGE = "Invalid credential: expected a non-empty JSON object."


class Verifier(Protocol):
    """Checks a credential and returns a normalized result.

    Expected failures (invalid credential, expiry, unreachable backend,
    rejected credential) are reported as ``success=False`` results and
    never raised.
    """

    async def verify(self, credential: Any) -> VerificationResult: ...


def is_valid_credential(credential: Any) -> bool:
    """Check that a credential is a non-empty JSON object."""
    return isinstance(credential, Mapping) and len(credential) > 0


def invalid_credential_result() -> VerificationResult:
    return build_verifier_response(success=False, message=INVALID_CREDENTIAL_MESSAGE)
