"""
Verifier selection.

Online backends are looked up by name in a static table; names are
never used to locate code.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping

from vc_verification.config import ConfigurationError, VerificationConfig, VerificationMethod
from vc_verification.verifiers import (
    RemoteApiVerifier,
    SignatureVerifier,
    TrustIssuerVerifier,
    Verifier,
)


VERIFIER_NAME_PATTERN = re.compile(r"^[A-Za-z]+$")


def _remote_api(config: VerificationConfig) -> Verifier:
    return RemoteApiVerifier(
        config.api_endpoint,
        timeout=config.timeout,
        verify_ssl=config.verify_ssl,
    )


def _trust_issuer(config: VerificationConfig) -> Verifier:
    return TrustIssuerVerifier(
        config.api_endpoint,
        api_token=config.api_token,
        expiry_field=config.expiry_field,
        timeout=config.timeout,
        verify_ssl=config.verify_ssl,
    )


# Keys are lowercase verifierName values
ONLINE_VERIFIERS: dict[str, Callable[[VerificationConfig], Verifier]] = {
    "api": _remote_api,
    "dhiway": _trust_issuer,
}


class VerifierFactory:
    """Builds the verifier selected by a configuration."""

    @staticmethod
    def get_verifier(config: VerificationConfig | Mapping[str, Any] | None) -> Verifier:
        """Return the verifier for a configuration.

        Args:
            config: VerificationConfig or its wire (camelCase) mapping.

        Returns:
            A freshly constructed verifier.

        Raises:
            ConfigurationError: If the method or online verifier is unknown,
                or a required parameter is missing.
        """
        if not isinstance(config, VerificationConfig):
            config = VerificationConfig.from_dict(config)

        method = config.resolved_method
        if method == VerificationMethod.ONLINE.value:
            return VerifierFactory._online_verifier(config)
        if method == VerificationMethod.OFFLINE.value:
            return SignatureVerifier()

        raise ConfigurationError(f"unknown verification method: {method}")

    @staticmethod
    def _online_verifier(config: VerificationConfig) -> Verifier:
        name = config.verifier_name
        if not name:
            raise ConfigurationError(
                "unknown verification method: online requires a verifierName"
            )
        if not isinstance(name, str) or not VERIFIER_NAME_PATTERN.match(name):
            raise ConfigurationError(f"invalid online verifier name: {name!r}")

        builder = ONLINE_VERIFIERS.get(name.lower())
        if builder is None:
            raise ConfigurationError(f"unknown online verifier: {name}")
        return builder(config)
