"""
Outbound calls to remote verification backends.

Backends answer with a JSON body shaped like::

    {
        "error": {"message": "..."} | [{"message": "..."}, ...],
        "checks": [{"title": "...", "isValid": true}, ...]
    }

Both keys are optional.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from vc_verification.response import (
    CheckResult,
    TranslatedError,
    VerificationResult,
    build_verifier_response,
)
from vc_verification.translator import translate_error


logger = logging.getLogger(__name__)

TRANSPORT_ERROR_MESSAGE = "Verification API error"
UNKNOWN_CHECK_ERROR = "Unknown error in check"
UNKNOWN_BACKEND_ERROR = "An unknown error occurred"


class TransportError(Exception):
    """Raised when a verification backend cannot be reached or understood."""


@dataclass
class BackendResponse:
    """Interpreted verification backend answer."""

    checks: list[CheckResult] = field(default_factory=list)
    errors: list[TranslatedError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


async def post_credential(
    url: str,
    credential: dict[str, Any],
    headers: dict[str, str] | None = None,
    timeout: float = 10.0,
    verify_ssl: bool = True,
) -> BackendResponse:
    """POST a credential to a verification backend and interpret the answer.

    Args:
        url: Backend endpoint.
        credential: Credential sent as the JSON body.
        headers: Extra request headers (e.g. Authorization).
        timeout: Request timeout in seconds.
        verify_ssl: Whether to verify SSL certificates.

    Returns:
        BackendResponse with the backend's checks and translated errors.

    Raises:
        TransportError: On network errors, timeouts, invalid or
            unrecognized bodies, and non-2xx responses that do not
            report at least one verification error.
    """
    request_headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if headers:
        request_headers.update(headers)

    logger.debug("Posting credential to %s", url)
    try:
        async with client_for(timeout, verify_ssl, asynchronous=True) as client:
            response = await client.post(url, json=credential, headers=request_headers)
            response.raise_for_status()
            data = response.json()

    except httpx.HTTPStatusError as e:
        # A rejection only counts as an answer when it names a failure
        rejection = _rejection_from(e.response)
        if rejection is not None:
            return rejection
        raise TransportError(str(e)) from e
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise TransportError(str(e) or type(e).__name__) from e
    except ValueError as e:
        raise TransportError(f"Invalid JSON in response from {url}") from e

    if not isinstance(data, dict):
        raise TransportError(f"Unexpected response from {url}: expected a JSON object")
    return interpret_response(data)


def client_for(
    timeout: float, verify_ssl: bool = True, asynchronous: bool = False
) -> httpx.Client | httpx.AsyncClient:
    """Build an HTTP client with a bounded timeout."""
    if asynchronous:
        return httpx.AsyncClient(timeout=timeout, verify=verify_ssl)
    return httpx.Client(timeout=timeout, verify=verify_ssl)


def _rejection_from(response: httpx.Response) -> BackendResponse | None:
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    try:
        result = interpret_response(data)
    except TransportError:
        return None
    return result if result.has_errors else None


def interpret_response(data: dict[str, Any]) -> BackendResponse:
    """Collect checks and translated errors from a backend body.

    Failed checks and reported errors both become TranslatedErrors.

    Args:
        data: Decoded backend response body.

    Returns:
        BackendResponse with normalized checks and errors.

    Raises:
        TransportError: If ``checks`` or ``error`` has an unexpected type.
    """
    checks = data.get("checks")
    if checks is not None and not isinstance(checks, list):
        raise TransportError(
            f"Unexpected checks in response: expected a list, got {type(checks).__name__}"
        )
    error = data.get("error")
    if error is not None and not isinstance(error, (dict, list, str)):
        raise TransportError(
            f"Unexpected error in response: got {type(error).__name__}"
        )

    result = BackendResponse()

    for item in checks or []:
        if not isinstance(item, dict):
            continue
        check = CheckResult.from_dict(item)
        result.checks.append(check)
        if not check.status:
            result.errors.append(translate_error(check.title or UNKNOWN_CHECK_ERROR))

    if error:
        raw_errors = error if isinstance(error, list) else [error]
        for raw in raw_errors:
            result.errors.append(translate_error(_raw_message(raw)))

    logger.debug(
        "Backend reported %d checks, %d errors", len(result.checks), len(result.errors)
    )
    return result


def _raw_message(raw: Any) -> str:
    if isinstance(raw, dict):
        return raw.get("message") or UNKNOWN_BACKEND_ERROR
    if isinstance(raw, str) and raw:
        return raw
    return UNKNOWN_BACKEND_ERROR


def transport_error_result(error: TransportError) -> VerificationResult:
    """Build the canonical result for an unreachable backend."""
    message = str(error)
    return build_verifier_response(
        success=False,
        message=TRANSPORT_ERROR_MESSAGE,
        errors=[TranslatedError(error=message, raw=message)],
    )
