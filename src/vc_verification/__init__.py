"""
VC Verification - pluggable Verifiable Credential verification.

Supports:
- Online verification through a remote verification API
- Online verification through a trust issuer (e.g. Dhiway), with bearer
  authentication and a local expiry check
- Offline signature verification (not yet available)
- Translation of backend errors into stable, user-facing messages
"""

from vc_verification.config import ConfigurationError, VerificationConfig, VerificationMethod
from vc_verification.factory import VerifierFactory
from vc_verification.response import (
    CheckResult,
    TranslatedError,
    VerificationResult,
    build_verifier_response,
)
from vc_verification.service import VerificationService, verify_credential
from vc_verification.translator import translate
from vc_verification.verifiers import (
    ExpiryError,
    RemoteApiVerifier,
    SignatureVerifier,
    TransportError,
    TrustIssuerVerifier,
    Verifier,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "VerificationConfig",
    "VerificationMethod",
    "VerifierFactory",
    "CheckResult",
    "TranslatedError",
    "VerificationResult",
    "build_verifier_response",
    "VerificationService",
    "verify_credential",
    "translate",
    "ExpiryError",
    "RemoteApiVerifier",
    "SignatureVerifier",
    "TransportError",
    "TrustIssuerVerifier",
    "Verifier",
]
