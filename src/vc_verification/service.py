"""
Verification entry point.

``VerificationService.verify`` never raises: configuration errors and
unexpected failures come back as ``success=False`` results.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from vc_verification.config import ConfigurationError, VerificationConfig
from vc_verification.factory import VerifierFactory
from vc_verification.response import VerificationResult
from vc_verification.verifiers.base import INVALID_CREDENTIAL_MESSAGE, is_valid_credential


logger = logging.getLogger(__name__)


class VerificationService:
    """Validates the request, selects a verifier and runs it."""

    def __init__(self, factory: type[VerifierFactory] = VerifierFactory) -> None:
        self.factory = factory

    async def verify(self, payload: Mapping[str, Any]) -> VerificationResult:
        """Verify a credential.

        Args:
            payload: ``{"credential": {...}, "config": {...}}``. ``config``
                may be a mapping or a VerificationConfig.

        Returns:
            The verifier's result, unchanged, or a failure result carrying
            the error message when the request could not be verified.
        """
        try:
            if not isinstance(payload, Mapping):
                raise ConfigurationError("Invalid payload: expected an object")

            credential = payload.get("credential")
            if credential is None:
                raise ConfigurationError("Missing required parameter: credential")
            if not is_valid_credential(credential):
                raise ConfigurationError(INVALID_CREDENTIAL_MESSAGE)

            verifier = self.factory.get_verifier(payload.get("config") or {})
            result = await verifier.verify(credential)
            logger.debug(
                "%s returned success=%s", type(verifier).__name__, result.success
            )
            return result

        except ConfigurationError as e:
            logger.warning("Verification request rejected: %s", e)
            return VerificationResult(success=False, message=str(e))
        except Exception as e:
            logger.exception("Unexpected error during verification")
            return VerificationResult(success=False, message=str(e) or type(e).__name__)


async def verify_credential(
    credential: Mapping[str, Any],
    config: VerificationConfig | Mapping[str, Any] | None = None,
) -> VerificationResult:
    """Convenience function to verify a credential.

    Args:
        credential: The credential to verify.
        config: Verification configuration.

    Returns:
        VerificationResult for the credential.
    """
    service = VerificationService()
    return await service.verify({"credential": credential, "config": config})
