"""Sync HTTP transport with status evaluation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Literal, Protocol

import httpx

from ..config import DriveClientConfig
from .errors import DriveApiError, DriveTransportError, classify_api_error
from .response_parsing import parse_error_payload, parse_json_payload

logger = logging.getLogger("drive_gate")

ResponseKind = Literal["json", "bytes", "empty"]


class SyncTransportClient(Protocol):
    def request(self, method: str, url: str, **kwargs: object) -> httpx.Response: ...
    def close(self) -> None: ...


def build_default_headers(config: DriveClientConfig) -> Mapping[str, str]:
    headers = {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }
    if config.access_token:
        headers["Authorization"] = f"Bearer {config.access_token}"
    return headers


def build_default_timeout(config: DriveClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


class SyncTransport:
    """Synchronous transport for the Drive v2 API.

    One call to :meth:`request` is one HTTP exchange. There is no retry here
    and no throttling; callers gate requests through a
    :class:`~drive_gate.core.throttling.RateLimitedExecutor`.
    """

    def __init__(
        self,
        config: DriveClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._upload_url = config.upload_url.rstrip("/") + "/"
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=config.base_url.rstrip("/") + "/",
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, object] | None = None,
        json_body: Mapping[str, object] | None = None,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
        upload: bool = False,
        response_kind: ResponseKind = "json",
    ) -> dict[str, object] | bytes | None:
        if self._closed:
            raise DriveTransportError("transport is already closed")

        url = self._build_url(endpoint, upload=upload)
        logger.debug("request start method=%s endpoint=%s", method, url)

        kwargs: dict[str, object] = {}
        if params:
            kwargs["params"] = dict(params)
        if json_body is not None:
            kwargs["json"] = dict(json_body)
        if content is not None:
            kwargs["content"] = content
        if headers:
            kwargs["headers"] = dict(headers)

        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error(
                "request network error method=%s endpoint=%s error=%s",
                method,
                url,
                exc.__class__.__name__,
            )
            raise DriveTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = response.status_code
        logger.debug(
            "response received method=%s endpoint=%s http_status=%s",
            method,
            url,
            http_status,
        )

        mapped_error = classify_api_error(
            parse_error_payload(response) if http_status >= 300 else None,
            http_status=http_status,
        )
        if mapped_error is not None:
            logger.error(
                "request failed method=%s endpoint=%s http_status=%s reason=%s",
                method,
                url,
                http_status,
                mapped_error.reason,
            )
            raise mapped_error

        logger.info("request success method=%s endpoint=%s", method, url)
        return self._read_body(response, response_kind=response_kind)

    def _build_url(self, endpoint: str, *, upload: bool) -> str:
        normalized = endpoint.lstrip("/")
        if upload:
            return self._upload_url + normalized
        return normalized

    @staticmethod
    def _read_body(
        response: httpx.Response,
        *,
        response_kind: ResponseKind,
    ) -> dict[str, object] | bytes | None:
        if response_kind == "bytes":
            return response.content
        if response_kind == "empty":
            return None
        try:
            return parse_json_payload(response, http_status=response.status_code)
        except DriveApiError:
            logger.error(
                "response parse error http_status=%s",
                response.status_code,
            )
            raise


__all__ = [
    "ResponseKind",
    "SyncTransportClient",
    "SyncTransport",
    "build_default_headers",
    "build_default_timeout",
]
