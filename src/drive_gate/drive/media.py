"""Media payloads and multipart/related encoding for uploads."""

from __future__ import annotations

import json
import uuid
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class MediaUpload:
    """File content sent alongside metadata."""

    content: bytes
    mime_type: str = "application/octet-stream"

    def __post_init__(self) -> None:
        if not isinstance(self.content, (bytes, bytearray)):
            raise TypeError("content must be bytes")
        if not self.mime_type:
            raise ValueError("mime_type must not be empty")
        if not self.mime_type.isascii():
            raise ValueError("mime_type must be ASCII")


def encode_multipart_related(
    metadata: Mapping[str, object],
    media: MediaUpload,
    *,
    boundary: str | None = None,
) -> tuple[bytes, str]:
    """Build a ``multipart/related`` body: JSON metadata part, then media part.

    Returns the body and the matching ``Content-Type`` header value.
    """

    marker = boundary or f"drive_gate_{uuid.uuid4().hex}"
    delimiter = f"--{marker}\r\n".encode("ascii")
    body = b"".join(
        [
            delimiter,
            b"Content-Type: application/json; charset=UTF-8\r\n\r\n",
            json.dumps(dict(metadata)).encode("utf-8"),
            b"\r\n",
            delimiter,
            f"Content-Type: {media.mime_type}\r\n\r\n".encode("ascii"),
            bytes(media.content),
            b"\r\n",
            f"--{marker}--\r\n".encode("ascii"),
        ]
    )
    return body, f"multipart/related; boundary={marker}"


__all__ = [
    "MediaUpload",
    "encode_multipart_related",
]
