from __future__ import annotations

import httpx
import pytest

from drive_gate.config import DriveClientConfig
from drive_gate.core.errors import (
    DriveNotFoundError,
    DriveProtocolError,
    DriveRateLimitError,
    DriveServerError,
    DriveTransportError,
)
from drive_gate.core.transport import SyncTransport, build_default_headers
from tests.shared.transport import build_config, build_mock_transport, error_body


def test_transport_returns_json_payload_and_encodes_params():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"items": [{"id": "a"}]})

    transport = build_mock_transport(handler)
    payload = transport.request(
        "GET",
        "/files",
        params={"q": "title = 'x'", "maxResults": 1000, "includeTeamDriveItems": False},
    )

    assert payload == {"items": [{"id": "a"}]}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/drive/v2/files"
    assert request.url.params["q"] == "title = 'x'"
    assert request.url.params["maxResults"] == "1000"
    assert request.url.params["includeTeamDriveItems"] == "false"


def test_transport_upload_routes_to_upload_url():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "abc"})

    transport = build_mock_transport(handler)
    transport.request(
        "PUT",
        "files/abc",
        params={"uploadType": "multipart"},
        content=b"body",
        headers={"Content-Type": "multipart/related; boundary=x"},
        upload=True,
    )

    request = seen[0]
    assert request.url.path == "/upload/drive/v2/files/abc"
    assert request.headers["Content-Type"] == "multipart/related; boundary=x"
    assert request.content == b"body"


def test_transport_reads_bytes_and_empty_bodies():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, content=b"\x00raw")

    transport = build_mock_transport(handler)
    assert transport.request("GET", "files/a", response_kind="bytes") == b"\x00raw"
    assert transport.request("DELETE", "files/a/permissions/p", response_kind="empty") is None


@pytest.mark.parametrize(
    ("status", "body", "expected_exception", "expected_reason"),
    [
        (404, error_body(404, "notFound"), DriveNotFoundError, "notFound"),
        (403, error_body(403, "userRateLimitExceeded"), DriveRateLimitError, "userRateLimitExceeded"),
        (429, error_body(429, "rateLimitExceeded"), DriveRateLimitError, "rateLimitExceeded"),
        (500, None, DriveServerError, None),
    ],
    ids=["not-found", "user-rate-limit", "too-many-requests", "server-html-error"],
)
def test_transport_maps_error_statuses(status, body, expected_exception, expected_reason):
    calls: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        if body is None:
            return httpx.Response(status, text="<html>oops</html>")
        return httpx.Response(status, json=body)

    transport = build_mock_transport(handler)
    with pytest.raises(expected_exception) as excinfo:
        transport.request("GET", "files/a")

    assert excinfo.value.http_status == status
    assert excinfo.value.reason == expected_reason
    assert calls == [1]


def test_transport_wraps_network_errors_without_retrying():
    calls: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        raise httpx.ConnectError("network down", request=request)

    transport = build_mock_transport(handler)
    with pytest.raises(DriveTransportError) as excinfo:
        transport.request("GET", "files")
    assert excinfo.value.cause == "network"
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
    assert calls == [1]


def test_transport_rejects_non_json_success_body():
    transport = build_mock_transport(lambda request: httpx.Response(200, text="not json"))
    with pytest.raises(DriveProtocolError):
        transport.request("GET", "files")


def test_transport_rejects_requests_after_close():
    transport = build_mock_transport(lambda request: httpx.Response(200, json={}))
    transport.close()
    transport.close()
    assert transport.closed is True
    with pytest.raises(DriveTransportError):
        transport.request("GET", "files")


def test_default_headers_include_bearer_token_only_when_configured():
    assert "Authorization" not in build_default_headers(DriveClientConfig())
    headers = build_default_headers(DriveClientConfig(access_token="tok"))
    assert headers["Authorization"] == "Bearer tok"
    assert headers["User-Agent"] == "drive-gate/0.1.0"


def test_transport_can_initialize_and_close_with_real_httpx_client():
    transport = SyncTransport(build_config())
    transport.close()
    assert transport.closed is True
