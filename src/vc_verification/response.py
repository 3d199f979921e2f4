"""
Verification result model and response builder.

Every verifier reports through the same contract:

    {"success": bool, "message": str, "errors"?: [...], "checks"?: [...]}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


SUCCESS_MESSAGE = "Credential verified successfully."
FAILURE_MESSAGE = "Credential verification failed."


@dataclass(frozen=True)
class CheckResult:
    """One atomic fact checked by a remote verifier."""

    title: str
    status: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheckResult:
        """Create a CheckResult from a backend check.

        Backends report either ``{title, status}`` or ``{message, isValid}``.
        """
        title = data.get("title") or data.get("message") or ""
        if "isValid" in data:
            status = data["isValid"]
        else:
            status = data.get("status")
        return cls(title=str(title), status=status is not False)

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "status": self.status}


@dataclass(frozen=True)
class TranslatedError:
    """A user-facing error paired with the backend's original message."""

    error: str
    raw: str

    def to_dict(self) -> dict[str, str]:
        return {"error": self.error, "raw": self.raw}


@dataclass(frozen=True)
class VerificationResult:
    """Canonical verification result."""

    success: bool
    message: str
    errors: list[TranslatedError] | None = None
    checks: list[CheckResult] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape, omitting absent keys."""
        data: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.errors is not None:
            data["errors"] = [e.to_dict() for e in self.errors]
        if self.checks is not None:
            data["checks"] = [c.to_dict() for c in self.checks]
        return data


def build_verifier_response(
    success: bool,
    message: str | None = None,
    errors: list[TranslatedError] | None = None,
    checks: list[CheckResult] | None = None,
) -> VerificationResult:
    """Build a VerificationResult that satisfies the result contract.

    Successful results never carry ``errors``; failed results always do
    (possibly empty) and never echo ``checks``.

    Args:
        success: Whether verification succeeded.
        message: Result message. Defaults to a fixed message per outcome.
        errors: Translated errors for a failed verification.
        checks: Backend checks to echo back on success.

    Returns:
        The canonical VerificationResult.
    """
    if success:
        return VerificationResult(
            success=True,
            message=message or SUCCESS_MESSAGE,
            checks=list(checks) if checks is not None else None,
        )

    return VerificationResult(
        success=False,
        message=message or FAILURE_MESSAGE,
        errors=list(errors) if errors else [],
    )
