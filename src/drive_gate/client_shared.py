"""Shared helpers for client bootstrap."""

from __future__ import annotations

from .config import DriveClientConfig
from .core.errors import DriveValidationError
from .core.throttling import RateLimitedExecutor


def validate_client_config(config: DriveClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise DriveValidationError(str(exc)) from exc


def resolve_executor(
    *,
    config: DriveClientConfig,
    executor: RateLimitedExecutor | None,
) -> RateLimitedExecutor:
    if executor is not None:
        return executor
    return RateLimitedExecutor(config.throttling.min_elapsed_ms)


__all__ = [
    "validate_client_config",
    "resolve_executor",
]
