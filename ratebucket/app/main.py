"""App bootstrap for simulated or live-clock runs."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import Settings
from ..core.clock import SimClock, SystemClock
from ..limiter.bucket import TokenBucket


def configure_logging(settings: Settings):
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_environment(
    settings: Settings, clock: Optional[SimClock | SystemClock] = None
) -> tuple[TokenBucket, SimClock | SystemClock]:
    if clock is None:
        clock = SystemClock(speed=settings.clock_speed)
    bucket = settings.build_bucket(clock.now())
    return bucket, clock
