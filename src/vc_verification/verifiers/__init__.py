"""Verification strategies."""

from vc_verification.verifiers.base import Verifier, is_valid_credential
from vc_verification.verifiers.http import TransportError
from vc_verification.verifiers.remote_api import RemoteApiVerifier
from vc_verification.verifiers.signature import SignatureVerifier
from vc_verification.verifiers.trust_issuer import ExpiryError, TrustIssuerVerifier

__all__ = [
    "Verifier",
    "is_valid_credential",
    "TransportError",
    "RemoteApiVerifier",
    "SignatureVerifier",
    "TrustIssuerVerifier",
    "ExpiryError",
]
