"""Throttled call sites for the Drive v2 API."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, cast
from urllib.parse import quote

from ..core.errors import DriveProtocolError
from ..core.pagination import iterate_items, iterate_pages
from ..core.throttling import RateLimitedExecutor
from ..core.transport import SyncTransport
from .media import MediaUpload, encode_multipart_related
from .params import build_list_files_params, build_placeholder_body, with_team_drive_flag


def _segment(value: str) -> str:
    return quote(value, safe="")


class DriveService:
    """Routes every Drive request through one shared executor.

    Each public method issues exactly one gated request, except
    :meth:`insert_blank_file` (delegates to :meth:`insert_folder`) and
    :meth:`iter_files` (one gated request per page).
    """

    def __init__(
        self,
        transport: SyncTransport,
        executor: RateLimitedExecutor,
        *,
        supports_team_drives: bool = False,
    ) -> None:
        self._transport = transport
        self._executor = executor
        self._supports_team_drives = supports_team_drives

    @property
    def supports_team_drives(self) -> bool:
        return self._supports_team_drives

    def _flags(self, options: Mapping[str, Any] | None = None) -> dict[str, object]:
        return with_team_drive_flag(options, supports_team_drives=self._supports_team_drives)

    def get_permissions(self, file_id: str) -> dict[str, Any]:
        params = self._flags()
        return self._executor.run(
            lambda: self._transport.request(
                "GET",
                f"files/{_segment(file_id)}/permissions",
                params=params,
            )
        )

    def get_files(
        self,
        query: str,
        page_token: str | None = None,
        order_by: str | None = None,
    ) -> dict[str, Any]:
        params = build_list_files_params(
            query,
            page_token=page_token,
            order_by=order_by,
            supports_team_drives=self._supports_team_drives,
        )
        return self._executor.run(lambda: self._transport.request("GET", "files", params=params))

    def iter_files(self, query: str, order_by: str | None = None) -> Iterator[dict[str, Any]]:
        return iterate_pages(lambda token: self.get_files(query, token, order_by))

    def iter_file_items(self, query: str, order_by: str | None = None) -> Iterator[dict[str, Any]]:
        return iterate_items(self.iter_files(query, order_by))

    def download_file(self, file_id: str) -> bytes:
        params = self._flags({"alt": "media"})
        return cast(
            bytes,
            self._executor.run(
                lambda: self._transport.request(
                    "GET",
                    f"files/{_segment(file_id)}",
                    params=params,
                    response_kind="bytes",
                )
            ),
        )

    def update_file(
        self,
        metadata: Mapping[str, Any],
        file_id: str,
        media: MediaUpload | None = None,
    ) -> dict[str, Any]:
        endpoint = f"files/{_segment(file_id)}"
        if media is None:
            body = dict(metadata)
            return self._executor.run(
                lambda: self._transport.request("PUT", endpoint, json_body=body)
            )

        content, content_type = encode_multipart_related(metadata, media)
        return self._executor.run(
            lambda: self._transport.request(
                "PUT",
                endpoint,
                params={"uploadType": "multipart"},
                content=content,
                headers={"Content-Type": content_type},
                upload=True,
            )
        )

    def insert_folder(self, body: Mapping[str, Any]) -> dict[str, Any]:
        payload = dict(body)
        params = self._flags()
        return self._executor.run(
            lambda: self._transport.request("POST", "files", params=params, json_body=payload)
        )

    def insert_blank_file(self, parent_id: str) -> dict[str, Any]:
        # insert_folder is already gated
        return self.insert_folder(build_placeholder_body(parent_id))

    def copy_file(
        self,
        body: Mapping[str, Any],
        file_id: str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        payload = dict(body)
        params = self._flags(options)
        return self._executor.run(
            lambda: self._transport.request(
                "POST",
                f"files/{_segment(file_id)}/copy",
                params=params,
                json_body=payload,
            )
        )

    def insert_permission(
        self,
        body: Mapping[str, Any],
        file_id: str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        payload = dict(body)
        params = self._flags(options)
        return self._executor.run(
            lambda: self._transport.request(
                "POST",
                f"files/{_segment(file_id)}/permissions",
                params=params,
                json_body=payload,
            )
        )

    def remove_permission(
        self,
        file_id: str,
        permission_id: str,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        params = self._flags(options)
        self._executor.run(
            lambda: self._transport.request(
                "DELETE",
                f"files/{_segment(file_id)}/permissions/{_segment(permission_id)}",
                params=params,
                response_kind="empty",
            )
        )

    def get_root_id(self) -> str:
        payload = self._executor.run(
            lambda: self._transport.request("GET", "files/root", params={"fields": "id"})
        )
        root_id = payload.get("id") if isinstance(payload, dict) else None
        if not isinstance(root_id, str) or not root_id:
            raise DriveProtocolError("root id missing from response")
        return root_id


__all__ = [
    "DriveService",
]
