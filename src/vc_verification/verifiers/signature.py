"""
Offline signature verifier.

Placeholder for local cryptographic proof verification. Until a proof
algorithm is implemented every credential fails deterministically.
"""

from __future__ import annotations

from typing import Any

from vc_verification.response import TranslatedError, VerificationResult, build_verifier_response
from vc_verification.verifiers.base import invalid_credential_result, is_valid_credential


SIGNATURE_FAILURE_MESSAGE = "Credential verification using signature failed."


class SignatureVerifier:
    """Verifies credentials locally, without a network call."""

    async def verify(self, credential: Any) -> VerificationResult:
        if not is_valid_credential(credential):
            return invalid_credential_result()

        return build_verifier_response(
            success=False,
            message=SIGNATURE_FAILURE_MESSAGE,
            errors=[
                TranslatedError(
                    error="Offline signature verification is not available.",
                    raw="Signature verification not implemented",
                )
            ],
        )
