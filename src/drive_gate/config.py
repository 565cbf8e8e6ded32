"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .core.throttling import validate_min_elapsed_ms

DEFAULT_MIN_ELAPSED_MS = 100.0


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 60.0
    timeout_write_seconds: float = 60.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class ThrottlingConfig:
    """Throttling-related settings."""

    min_elapsed_ms: float = DEFAULT_MIN_ELAPSED_MS

    def validate(self) -> None:
        validate_min_elapsed_ms(self.min_elapsed_ms, name="throttling.min_elapsed_ms")


@dataclass(slots=True, frozen=True)
class DriveClientConfig:
    """Runtime configuration for the Drive client."""

    base_url: str = "https://www.googleapis.com/drive/v2"
    upload_url: str = "https://www.googleapis.com/upload/drive/v2"
    user_agent: str = "drive-gate/0.1.0"
    access_token: str | None = field(default=None, repr=False)
    supports_team_drives: bool = False

    transport: TransportConfig = field(default_factory=TransportConfig)
    throttling: ThrottlingConfig = field(default_factory=ThrottlingConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.upload_url:
            raise ValueError("upload_url must not be empty")
        if not isinstance(self.supports_team_drives, bool):
            raise ValueError("supports_team_drives must be bool")
        self.transport.validate()
        self.throttling.validate()


__all__ = [
    "DEFAULT_MIN_ELAPSED_MS",
    "TransportConfig",
    "ThrottlingConfig",
    "DriveClientConfig",
]
