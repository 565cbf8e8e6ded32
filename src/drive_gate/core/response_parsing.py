"""Response body handling for the transport."""

from __future__ import annotations

from typing import Protocol

from .errors import DriveProtocolError


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse response JSON payload and map parse failures to domain errors."""

    try:
        payload = response.json()
    except Exception as exc:
        raise DriveProtocolError(
            "response body is not valid JSON",
            http_status=http_status,
        ) from exc

    if not isinstance(payload, dict):
        raise DriveProtocolError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    if any(not isinstance(key, str) for key in payload):
        raise DriveProtocolError(
            "response JSON object keys must be strings",
            http_status=http_status,
        )
    return payload


def parse_error_payload(response: JsonPayloadResponse) -> dict[str, object] | None:
    """Best-effort error body; a non-JSON error page yields ``None``."""

    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None


__all__ = [
    "JsonPayloadResponse",
    "parse_json_payload",
    "parse_error_payload",
]
