"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import TracebackType
from typing import Any

from .client_shared import resolve_executor, validate_client_config
from .config import DriveClientConfig
from .core.errors import DriveClientClosedError
from .core.pagination import iterate_items
from .core.throttling import RateLimitedExecutor
from .core.transport import SyncTransport
from .drive.media import MediaUpload
from .drive.protocol import RemoteStorageClient
from .drive.service import DriveService


class _GuardedDriveService:
    """Guard wrapper to block usage after client close."""

    def __init__(self, owner: "DriveClient", delegate: RemoteStorageClient) -> None:
        self._owner = owner
        self._delegate = delegate

    def get_permissions(self, file_id: str) -> dict[str, Any]:
        self._owner._ensure_open()
        return self._delegate.get_permissions(file_id)

    def get_files(
        self,
        query: str,
        page_token: str | None = None,
        order_by: str | None = None,
    ) -> dict[str, Any]:
        self._owner._ensure_open()
        return self._delegate.get_files(query, page_token, order_by)

    def iter_files(self, query: str, order_by: str | None = None) -> Iterator[dict[str, Any]]:
        iterator = iter(self._delegate.iter_files(query, order_by))
        while True:
            self._owner._ensure_open()
            try:
                page = next(iterator)
            except StopIteration:
                return
            self._owner._ensure_open()
            yield page

    def iter_file_items(self, query: str, order_by: str | None = None) -> Iterator[dict[str, Any]]:
        return iterate_items(self.iter_files(query, order_by))

    def download_file(self, file_id: str) -> bytes:
        self._owner._ensure_open()
        return self._delegate.download_file(file_id)

    def update_file(
        self,
        metadata: Mapping[str, Any],
        file_id: str,
        media: MediaUpload | None = None,
    ) -> dict[str, Any]:
        self._owner._ensure_open()
        return self._delegate.update_file(metadata, file_id, media)

    def insert_folder(self, body: Mapping[str, Any]) -> dict[str, Any]:
        self._owner._ensure_open()
        return self._delegate.insert_folder(body)

    def insert_blank_file(self, parent_id: str) -> dict[str, Any]:
        self._owner._ensure_open()
        return self._delegate.insert_blank_file(parent_id)

    def copy_file(
        self,
        body: Mapping[str, Any],
        file_id: str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        self._owner._ensure_open()
        return self._delegate.copy_file(body, file_id, options)

    def insert_permission(
        self,
        body: Mapping[str, Any],
        file_id: str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        self._owner._ensure_open()
        return self._delegate.insert_permission(body, file_id, options)

    def remove_permission(
        self,
        file_id: str,
        permission_id: str,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self._owner._ensure_open()
        self._delegate.remove_permission(file_id, permission_id, options)

    def get_root_id(self) -> str:
        self._owner._ensure_open()
        return self._delegate.get_root_id()


class DriveClient:
    """Public Drive API client.

    All requests made through ``client.drive`` share ``client.executor``,
    so the configured floor holds across every operation.
    """

    def __init__(
        self,
        *,
        config: DriveClientConfig | None = None,
        transport: SyncTransport | None = None,
        executor: RateLimitedExecutor | None = None,
        service: RemoteStorageClient | None = None,
    ) -> None:
        self._config = config or DriveClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self.executor = resolve_executor(config=self._config, executor=executor)
        internal_service = service or DriveService(
            self._transport,
            self.executor,
            supports_team_drives=self._config.supports_team_drives,
        )
        self._closed = False
        self.drive = _GuardedDriveService(self, internal_service)

    def _ensure_open(self) -> None:
        if self._closed:
            raise DriveClientClosedError("DriveClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "DriveClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "DriveClient",
]
