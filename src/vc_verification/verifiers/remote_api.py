"""
Generic remote API verifier.

Posts the credential, unauthenticated, to a configured verification
endpoint and echoes the backend's checks back on success.
"""

from __future__ import annotations

import logging
from typing import Any

from vc_verification.config import DEFAULT_TIMEOUT, ConfigurationError
from vc_verification.response import VerificationResult, build_verifier_response
from vc_verification.verifiers.base import invalid_credential_result, is_valid_credential
from vc_verification.verifiers.http import (
    TransportError,
    post_credential,
    transport_error_result,
)


logger = logging.getLogger(__name__)


class RemoteApiVerifier:
    """Delegates verification to a remote HTTP API."""

    def __init__(
        self,
        api_endpoint: str | None,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
    ) -> None:
        """Initialize the verifier.

        Args:
            api_endpoint: Full URL the credential is posted to.
            timeout: HTTP request timeout in seconds.
            verify_ssl: Whether to verify SSL certificates.

        Raises:
            ConfigurationError: If no endpoint is given.
        """
        if not api_endpoint:
            raise ConfigurationError("apiEndpoint is required for the remote API verifier")
        self.api_endpoint = api_endpoint
        self.timeout = timeout
        self.verify_ssl = verify_ssl

    async def verify(self, credential: Any) -> VerificationResult:
        """Verify a credential against the remote API.

        Args:
            credential: The credential to verify.

        Returns:
            VerificationResult, with the backend checks on success.
        """
        if not is_valid_credential(credential):
            return invalid_credential_result()

        try:
            response = await post_credential(
                self.api_endpoint,
                dict(credential),
                timeout=self.timeout,
                verify_ssl=self.verify_ssl,
            )
        except TransportError as e:
            logger.warning("Verification API %s failed: %s", self.api_endpoint, e)
            return transport_error_result(e)

        if response.has_errors:
            return build_verifier_response(success=False, errors=response.errors)

        return build_verifier_response(success=True, checks=response.checks)
