"""
Verification configuration.

Configuration is plain data handed in by the caller. Nothing in this
package reads the process environment; that belongs to the bootstrap
layer (see ``vc_verification.cli``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


DEFAULT_EXPIRY_FIELD = "validUntil"
DEFAULT_TIMEOUT = 10.0


class ConfigurationError(Exception):
    """Raised when the credential or verification configuration is invalid."""


class VerificationMethod(Enum):
    """Verification strategies."""

    ONLINE = "online"
    OFFLINE = "offline"


@dataclass(frozen=True)
class VerificationConfig:
    """Strategy selection and strategy parameters."""

    method: str | None = None
    verifier_name: str | None = None
    api_endpoint: str | None = None
    api_token: str | None = None
    expiry_field: str = DEFAULT_EXPIRY_FIELD
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> VerificationConfig:
        """Create a VerificationConfig from its wire (camelCase) form.

        Args:
            data: Configuration mapping, e.g. ``{"method": "online",
                "verifierName": "dhiway", "apiEndpoint": "https://..."}``.

        Returns:
            The parsed configuration.

        Raises:
            ConfigurationError: If the configuration is not a mapping, or
                carries an invalid timeout or a non-boolean verifySsl.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Invalid config: expected an object, got {type(data).__name__}"
            )

        timeout = data.get("timeout", DEFAULT_TIMEOUT)
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid timeout: {timeout!r}") from e
        if timeout <= 0:
            raise ConfigurationError(f"Invalid timeout: {timeout!r}")

        verify_ssl = data.get("verifySsl", True)
        if not isinstance(verify_ssl, bool):
            raise ConfigurationError(
                f"Invalid verifySsl: expected true or false, got {verify_ssl!r}"
            )

        return cls(
            method=data.get("method"),
            verifier_name=data.get("verifierName"),
            api_endpoint=data.get("apiEndpoint"),
            api_token=data.get("apiToken"),
            expiry_field=data.get("expiryField") or DEFAULT_EXPIRY_FIELD,
            timeout=timeout,
            verify_ssl=verify_ssl,
        )

    @property
    def resolved_method(self) -> str:
        """The method, defaulting to online when unset."""
        return self.method or VerificationMethod.ONLINE.value
