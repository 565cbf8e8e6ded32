from __future__ import annotations

import pytest

from drive_gate.core.errors import DriveProtocolError
from drive_gate.core.pagination import iterate_items, iterate_pages, parse_next_page_token


@pytest.mark.parametrize("token", [None, "", "   ", "\n\t"])
def test_blank_or_missing_token_ends_listing(token):
    assert parse_next_page_token({"nextPageToken": token}) is None
    assert parse_next_page_token({}) is None


def test_page_token_is_returned_verbatim():
    assert parse_next_page_token({"nextPageToken": " ~!@AbC== "}) == " ~!@AbC== "


def test_parse_next_page_token_rejects_non_string():
    with pytest.raises(DriveProtocolError):
        parse_next_page_token({"nextPageToken": 3})


def test_iterate_pages_passes_tokens_back_untouched():
    requested: list[str | None] = []
    pages = {
        None: {"nextPageToken": "tok= ", "x": 1},
        "tok= ": {"nextPageToken": " ", "x": 2},
    }

    def fetch(token):
        requested.append(token)
        return pages[token]

    visited = [p["x"] for p in iterate_pages(fetch)]
    assert visited == [1, 2]
    assert requested == [None, "tok= "]


def test_iterate_pages_detects_loop_back_to_resume_token():
    pages = {
        "b": {"nextPageToken": "c"},
        "c": {"nextPageToken": "b"},
    }
    with pytest.raises(DriveProtocolError, match="loop"):
        list(iterate_pages(lambda token: pages[token], page_token="b"))


def test_iterate_pages_guardrail():
    counter = iter(range(100))
    with pytest.raises(DriveProtocolError, match="guardrail"):
        list(iterate_pages(lambda token: {"nextPageToken": str(next(counter))}, max_pages=3))


def test_iterate_items_flattens_and_tolerates_missing_items():
    pages = [{"items": [{"id": "a"}]}, {}, {"items": [{"id": "b"}, {"id": "c"}]}]
    assert [item["id"] for item in iterate_items(pages)] == ["a", "b", "c"]


def test_iterate_items_rejects_non_list_items():
    with pytest.raises(DriveProtocolError, match="items must be a list"):
        list(iterate_items([{"items": {"id": "a"}}]))
