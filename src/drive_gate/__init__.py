"""Public package exports for the throttled Drive client."""

from .client import DriveClient
from .config import DriveClientConfig
from .core.throttling import RateLimitedExecutor
from .drive.service import DriveService

__all__ = ["DriveClient", "DriveClientConfig", "DriveService", "RateLimitedExecutor"]
