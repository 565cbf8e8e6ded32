"""Error types and HTTP status mapping."""

from __future__ import annotations

from collections.abc import Mapping

RATE_LIMIT_REASONS = frozenset({"userRateLimitExceeded", "rateLimitExceeded"})


def _error_body(payload: Mapping[str, object] | None) -> Mapping[str, object] | None:
    if not isinstance(payload, Mapping):
        return None
    body = payload.get("error")
    return body if isinstance(body, Mapping) else None


def extract_error_message(payload: Mapping[str, object] | None) -> str | None:
    body = _error_body(payload)
    if body is None:
        return None
    value = body.get("message")
    return str(value) if value is not None else None


def extract_error_reason(payload: Mapping[str, object] | None) -> str | None:
    """Return the first ``errors[].reason`` of a Google API error body."""

    body = _error_body(payload)
    if body is None:
        return None
    errors = body.get("errors")
    if not isinstance(errors, list):
        return None
    for item in errors:
        if isinstance(item, Mapping) and item.get("reason") is not None:
            return str(item["reason"])
    return None


class DriveApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        reason: str | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.reason = reason
        self.cause = cause


class DriveTransportError(DriveApiError):
    """Network/transport-level failure."""


class DriveClientClosedError(DriveApiError):
    """Raised when client is used after close."""


class DriveValidationError(DriveApiError):
    """Invalid input / request rejected."""


class DriveAuthError(DriveApiError):
    """Missing or expired credentials."""


class DrivePermissionError(DriveApiError):
    """Caller lacks access to the resource."""


class DriveRateLimitError(DriveApiError):
    """Remote quota exceeded."""


class DriveNotFoundError(DriveApiError):
    """File or permission does not exist."""


class DriveServerError(DriveApiError):
    """Server-side unexpected error."""


class DriveUnavailableError(DriveApiError):
    """Backend temporarily unavailable."""


class DriveProtocolError(DriveApiError):
    """Response shape or status inconsistency."""


def classify_api_error(
    payload: Mapping[str, object] | None,
    *,
    http_status: int | None,
) -> DriveApiError | None:
    """Map an HTTP status and Google error body to a domain exception."""

    if http_status is None:
        return DriveProtocolError("Missing HTTP status")
    if 200 <= http_status < 300:
        return None

    reason = extract_error_reason(payload)
    message = extract_error_message(payload) or "Drive API request failed"

    if http_status == 429 or (http_status == 403 and reason in RATE_LIMIT_REASONS):
        return DriveRateLimitError(message, http_status=http_status, reason=reason)
    if http_status == 400:
        return DriveValidationError(message, http_status=http_status, reason=reason)
    if http_status == 401:
        return DriveAuthError(message, http_status=http_status, reason=reason)
    if http_status == 403:
        return DrivePermissionError(message, http_status=http_status, reason=reason)
    if http_status == 404:
        return DriveNotFoundError(message, http_status=http_status, reason=reason)
    if http_status == 503:
        return DriveUnavailableError(
            message,
            http_status=http_status,
            reason=reason,
            cause="server_transient",
        )
    if http_status >= 500:
        return DriveServerError(
            message,
            http_status=http_status,
            reason=reason,
            cause="server_transient",
        )
    if http_status >= 400:
        return DriveValidationError(message, http_status=http_status, reason=reason)

    return DriveProtocolError(
        "Unexpected HTTP status in Drive response",
        http_status=http_status,
        reason=reason,
    )


__all__ = [
    "RATE_LIMIT_REASONS",
    "DriveApiError",
    "DriveTransportError",
    "DriveClientClosedError",
    "DriveValidationError",
    "DriveAuthError",
    "DrivePermissionError",
    "DriveRateLimitError",
    "DriveNotFoundError",
    "DriveServerError",
    "DriveUnavailableError",
    "DriveProtocolError",
    "extract_error_message",
    "extract_error_reason",
    "classify_api_error",
]
