"""Clocks that drive buckets in live loops and in simulated time."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class SystemClock:
    """Wall clock, optionally running ``speed`` times faster than real time.

    Both ``now`` and ``sleep`` are scaled, so a bucket sees the same accrual
    per sleep at any speed.
    """

    speed: float = 1.0
    origin: float = field(default_factory=time.time)

    def _scale(self) -> float:
        return max(1e-9, self.speed)

    def now(self) -> float:
        return self.origin + (time.time() - self.origin) * self._scale()

    def sleep(self, seconds: float):
        time.sleep(max(0.0, seconds) / self._scale())


@dataclass
class SimClock:
    """Virtual time. Sleeping advances the clock instead of blocking."""

    current: float = 0.0

    def now(self) -> float:
        return self.current

    def sleep(self, seconds: float):
        self.current += max(0.0, seconds)

    def advance(self, seconds: float):
        # may be negative to model a clock stepping backwards
        self.current += seconds
