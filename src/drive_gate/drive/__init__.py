"""Drive call-site package."""

from .media import MediaUpload
from .params import PLACEHOLDER_DESCRIPTION, PLACEHOLDER_TITLE
from .protocol import RemoteStorageClient

__all__ = [
    "MediaUpload",
    "RemoteStorageClient",
    "PLACEHOLDER_TITLE",
    "PLACEHOLDER_DESCRIPTION",
]
