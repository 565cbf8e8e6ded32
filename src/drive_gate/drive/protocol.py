"""Remote storage capability contract."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol

from .media import MediaUpload


class RemoteStorageClient(Protocol):
    """One method per remote storage operation."""

    def get_permissions(self, file_id: str) -> dict[str, Any]:
        """List permissions of a file or folder."""

    def get_files(
        self,
        query: str,
        page_token: str | None = None,
        order_by: str | None = None,
    ) -> dict[str, Any]:
        """Return one page of files matching ``query``."""

    def iter_files(self, query: str, order_by: str | None = None) -> Iterator[dict[str, Any]]:
        """Yield every page of files matching ``query``."""

    def iter_file_items(self, query: str, order_by: str | None = None) -> Iterator[dict[str, Any]]:
        """Yield every file resource matching ``query``, across pages."""

    def download_file(self, file_id: str) -> bytes:
        """Return raw file content."""

    def update_file(
        self,
        metadata: Mapping[str, Any],
        file_id: str,
        media: MediaUpload | None = None,
    ) -> dict[str, Any]:
        """Update metadata and optionally content of a file."""

    def insert_folder(self, body: Mapping[str, Any]) -> dict[str, Any]:
        """Create a file or folder from a metadata body."""

    def insert_blank_file(self, parent_id: str) -> dict[str, Any]:
        """Create the placeholder file under ``parent_id``."""

    def copy_file(
        self,
        body: Mapping[str, Any],
        file_id: str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Copy ``file_id`` using ``body`` as the target metadata."""

    def insert_permission(
        self,
        body: Mapping[str, Any],
        file_id: str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Add a permission to a file."""

    def remove_permission(
        self,
        file_id: str,
        permission_id: str,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """Remove a permission from a file."""

    def get_root_id(self) -> str:
        """Return the id of the root folder."""


__all__ = [
    "RemoteStorageClient",
]
