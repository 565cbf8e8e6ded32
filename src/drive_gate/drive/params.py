"""Request parameter and body builders for Drive endpoints."""

from __future__ import annotations

from collections.abc import Mapping

MAX_RESULTS = 1000

PLACEHOLDER_TITLE = "DO NOT DELETE OR MODIFY - will be deleted after copying completes"
PLACEHOLDER_DESCRIPTION = (
    "This document will be deleted after the folder copy is complete. "
    "It is only used to store properties necessary to complete the copying procedure"
)
PLACEHOLDER_MIME_TYPE = "text/plain"


def with_team_drive_flag(
    options: Mapping[str, object] | None,
    *,
    supports_team_drives: bool,
) -> dict[str, object]:
    """Copy ``options`` and set ``supportsTeamDrives``; the input is left untouched."""

    params = dict(options or {})
    params["supportsTeamDrives"] = supports_team_drives
    return params


def build_list_files_params(
    query: str,
    *,
    page_token: str | None,
    order_by: str | None,
    supports_team_drives: bool,
) -> dict[str, object]:
    params: dict[str, object] = {
        "q": query,
        "maxResults": MAX_RESULTS,
        "includeTeamDriveItems": supports_team_drives,
    }
    if supports_team_drives:
        params["supportsTeamDrives"] = True
    if page_token:
        params["pageToken"] = page_token
    if order_by:
        params["orderBy"] = order_by
    return params


def build_placeholder_body(parent_id: str) -> dict[str, object]:
    return {
        "description": PLACEHOLDER_DESCRIPTION,
        "title": PLACEHOLDER_TITLE,
        "parents": [
            {
                "kind": "drive#fileLink",
                "id": parent_id,
            }
        ],
        "mimeType": PLACEHOLDER_MIME_TYPE,
    }


__all__ = [
    "MAX_RESULTS",
    "PLACEHOLDER_TITLE",
    "PLACEHOLDER_DESCRIPTION",
    "PLACEHOLDER_MIME_TYPE",
    "with_team_drive_flag",
    "build_list_files_params",
    "build_placeholder_body",
]
