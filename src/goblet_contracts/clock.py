"""
Clock sources

The minting window is computed from "now", which production reads from the
system clock and tests drive by hand.
"""

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Current POSIX time in whole seconds"""
        ...


class SystemClock:
    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """Clock that only moves when told to"""

    def __init__(self, start: int = 1_640_995_200):
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> int:
        self._now += seconds
        return self._now

    def rewind(self, seconds: int) -> int:
        self._now -= seconds
        return self._now

    def set(self, timestamp: int) -> None:
        self._now = timestamp
