"""Rate throttling for outbound Drive calls."""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger("drive_gate")


def validate_min_elapsed_ms(value: object, *, name: str = "min_elapsed_ms") -> float:
    """Return the floor as a float, or raise ``ValueError``; never clamps."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    return float(value)


class RateLimitedExecutor:
    """Runs work no sooner than ``min_elapsed_ms`` after the previous start.

    Spacing is measured between call *starts*: the timestamp is taken after
    any wait and before ``work`` runs, so a slow call does not push the next
    one further out, and a call that raises still consumes its slot.

    The timestamp starts at construction time, so a call issued immediately
    after construction waits out the remainder of the interval.
    """

    def __init__(
        self,
        min_elapsed_ms: float,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        self._min_elapsed_ms = validate_min_elapsed_ms(min_elapsed_ms)
        self._min_elapsed_seconds = self._min_elapsed_ms / 1000.0
        self._clock = clock or time.monotonic
        self._sleep = sleeper or time.sleep
        self._lock = threading.Lock()
        self._last_request_at = self._clock()

    @property
    def min_elapsed_ms(self) -> float:
        return self._min_elapsed_ms

    def run(self, work: Callable[[], T]) -> T:
        with self._lock:
            elapsed = self._clock() - self._last_request_at
            if elapsed < self._min_elapsed_seconds:
                remaining = self._min_elapsed_seconds - elapsed
                logger.debug("throttling; sleeping for %.1f ms", remaining * 1000.0)
                self._sleep(remaining)
            self._last_request_at = self._clock()
        return work()


__all__ = [
    "RateLimitedExecutor",
    "validate_min_elapsed_ms",
]
