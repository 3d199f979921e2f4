"""
Backend error translation.

Maps raw messages reported by verification backends to stable,
user-facing explanations. The raw text is kept alongside for diagnostics.
"""

from __future__ import annotations

from vc_verification.response import TranslatedError


UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during verification."

ERROR_TRANSLATIONS: dict[str, str] = {
    "Failed to verify CordProof2024": (
        "The credential's authenticity couldn't be verified. It may be expired, "
        "revoked, altered, or issued by an untrusted source."
    ),
    "Error verifyDisclosedAttributes": (
        "Some information in the credential couldn't be verified. Please ensure "
        "the credential is complete and hasn't been modified."
    ),
    "verifyDisclosed Attribute": (
        "Some information in the credential couldn't be verified. Please ensure "
        "the credential is complete and hasn't been modified."
    ),
    "Unknown error in check": (
        "An unexpected issue occurred during credential verification. "
        "Please try again later."
    ),
    "VC expiration check failed": "The credential has expired and is no longer valid.",
    "VC expiration date is malformed": (
        "The credential's expiry date couldn't be read. Please ensure the "
        "credential is complete and hasn't been modified."
    ),
}


def translate(raw_message: str | None) -> str:
    """Translate a raw backend message into a user-facing explanation.

    Args:
        raw_message: Message as reported by the backend.

    Returns:
        The mapped explanation, or a generic fallback for unknown messages.
    """
    if raw_message is None:
        return UNKNOWN_ERROR_MESSAGE
    return ERROR_TRANSLATIONS.get(raw_message, UNKNOWN_ERROR_MESSAGE)


def translate_error(raw_message: str) -> TranslatedError:
    """Pair a raw backend message with its translation."""
    return TranslatedError(error=translate(raw_message), raw=raw_message)
