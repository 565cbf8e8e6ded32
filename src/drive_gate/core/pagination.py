"""Pagination over Drive ``files.list`` responses."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import DriveProtocolError


def parse_next_page_token(payload: dict[str, Any]) -> str | None:
    """Return ``nextPageToken`` verbatim, or ``None`` on the last page.

    Tokens are opaque and are passed back untouched; an empty or
    whitespace-only token marks the end of the listing.
    """

    raw = payload.get("nextPageToken")
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise DriveProtocolError("nextPageToken has unsupported type")
    if raw.strip() == "":
        return None
    return raw


def iterate_pages(
    fetch_page: Callable[[str | None], dict[str, Any]],
    *,
    page_token: str | None = None,
    max_pages: int = 10_000,
) -> Iterator[dict[str, Any]]:
    current = page_token
    seen_tokens: set[str] = set() if page_token is None else {page_token}

    for _ in range(max_pages):
        payload = fetch_page(current)
        yield payload

        next_token = parse_next_page_token(payload)
        if next_token is None:
            return
        if next_token in seen_tokens:
            raise DriveProtocolError("nextPageToken loop detected")
        seen_tokens.add(next_token)
        current = next_token

    raise DriveProtocolError("Exceeded pagination guardrail (max_pages)")


def iterate_items(pages: Iterable[dict[str, Any]]) -> Iterator[dict[str, Any]]:
    """Flatten the ``items`` arrays of a sequence of list pages."""

    for page in pages:
        items = page.get("items", [])
        if not isinstance(items, list):
            raise DriveProtocolError("items must be a list")
        yield from items


__all__ = [
    "parse_next_page_token",
    "iterate_pages",
    "iterate_items",
]
