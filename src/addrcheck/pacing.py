"""Pacing between consecutive lookups.

The pipeline calls `wait()` once after every request. Tests pass a fake
`sleep` so no wall-clock time is spent.
"""
from typing import Callable
import time


class FixedIntervalPacer:
    """Pause for the same interval after each request."""

    def __init__(self, interval: float, sleep: Callable[[float], None] = time.sleep):
        if interval < 0:
            raise ValueError("pacing interval must not be negative")
        self.interval = interval
        self._sleep = sleep

    def wait(self) -> None:
        if self.interval > 0:
            self._sleep(self.interval)
