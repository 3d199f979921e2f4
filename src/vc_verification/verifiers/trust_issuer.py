"""
Trust issuer verifier.

Delegates verification to a named issuer's verification service
(e.g. Dhiway), authenticating with an optional bearer token. Expired
credentials are rejected locally before any network call.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from vc_verification.config import DEFAULT_EXPIRY_FIELD, DEFAULT_TIMEOUT, ConfigurationError
from vc_verification.response import VerificationResult, build_verifier_response
from vc_verification.translator import translate_error
from vc_verification.verifiers.base import invalid_credential_result, is_valid_credential
from vc_verification.verifiers.http import (
    TransportError,
    post_credential,
    transport_error_result,
)


logger = logging.getLogger(__name__)

EXPIRED_RAW_MESSAGE = "VC expiration check failed"
MALFORMED_EXPIRY_RAW_MESSAGE = "VC expiration date is malformed"


class ExpiryError(Exception):
    """Raised when a credential is expired or its expiry date is malformed."""

    def __init__(self, raw_message: str, detail: str) -> None:
        super().__init__(detail)
        self.raw_message = raw_message


def parse_timestamp(value: Any) -> datetime:
    """Parse an expiry timestamp.

    Accepts ISO 8601 dates and datetimes (a trailing ``Z`` is allowed)
    and numeric epoch seconds. Naive values are taken as UTC.

    Args:
        value: Raw expiry value from the credential.

    Returns:
        Timezone-aware datetime.

    Raises:
        ValueError: If the value cannot be parsed.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def check_expiry(
    credential: Mapping[str, Any],
    expiry_field: str = DEFAULT_EXPIRY_FIELD,
    now: datetime | None = None,
) -> None:
    """Check a credential's expiry attribute.

    A missing attribute passes.

    Args:
        credential: The credential to check.
        expiry_field: Attribute holding the expiry timestamp.
        now: Reference time. Defaults to the current UTC time.

    Raises:
        ExpiryError: If the credential has expired or the attribute
            cannot be parsed.
    """
    if expiry_field not in credential or credential[expiry_field] is None:
        return

    value = credential[expiry_field]
    try:
        expires_at = parse_timestamp(value)
    except (ValueError, OverflowError, OSError) as e:
        raise ExpiryError(
            MALFORMED_EXPIRY_RAW_MESSAGE, f"Invalid {expiry_field}: {value!r}"
        ) from e

    now = now or datetime.now(timezone.utc)
    if expires_at < now:
        raise ExpiryError(EXPIRED_RAW_MESSAGE, f"Credential expired at {expires_at.isoformat()}")


class TrustIssuerVerifier:
    """Delegates verification to a trust issuer's verification API."""

    def __init__(
        self,
        api_endpoint: str | None,
        api_token: str | None = None,
        expiry_field: str = DEFAULT_EXPIRY_FIELD,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the verifier.

        Args:
            api_endpoint: URL the credential is posted to.
            api_token: Bearer token sent in the Authorization header, if set.
            expiry_field: Credential attribute holding the expiry timestamp.
            timeout: HTTP request timeout in seconds.
            verify_ssl: Whether to verify SSL certificates.
            clock: Returns the current time. Defaults to UTC now.

        Raises:
            ConfigurationError: If no endpoint is given.
        """
        if not api_endpoint:
            raise ConfigurationError("apiEndpoint is required for the trust issuer verifier")
        self.api_endpoint = api_endpoint
        self.api_token = api_token
        self.expiry_field = expiry_field or DEFAULT_EXPIRY_FIELD
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def verify(self, credential: Any) -> VerificationResult:
        """Verify a credential with the trust issuer.

        Performs:
        1. Local expiry check (no network call on failure)
        2. Remote verification with the issuer's API

        Args:
            credential: The credential to verify.

        Returns:
            VerificationResult. Successful results carry no checks.
        """
        if not is_valid_credential(credential):
            return invalid_credential_result()

        try:
            check_expiry(credential, self.expiry_field, now=self.clock())
        except ExpiryError as e:
            logger.info("Credential rejected before remote verification: %s", e)
            return build_verifier_response(
                success=False, errors=[translate_error(e.raw_message)]
            )

        try:
            response = await post_credential(
                self.api_endpoint,
                dict(credential),
                headers=self._auth_headers(),
                timeout=self.timeout,
                verify_ssl=self.verify_ssl,
            )
        except TransportError as e:
            logger.warning("Trust issuer API %s failed: %s", self.api_endpoint, e)
            return transport_error_result(e)

        if response.has_errors:
            return build_verifier_response(success=False, errors=response.errors)

        return build_verifier_response(success=True)

    def _auth_headers(self) -> dict[str, str]:
        if not self.api_token:
            return {}
        return {"Authorization": f"Bearer {self.api_token}"}
