"""Load .env and expose typed Settings for the entry points."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .limiter.bucket import TokenBucket
from .limiter.options import with_value


@dataclass(frozen=True)
class Settings:
    rate: float = 1024.0  # tokens per second
    capacity: float = 2048.0
    initial: Optional[float] = None  # None = start full
    clock_speed: float = 1.0
    log_level: str = "INFO"

    def build_bucket(self, now: float) -> TokenBucket:
        if self.initial is None:
            return TokenBucket(now, self.rate, self.capacity)
        return TokenBucket(now, self.rate, self.capacity, with_value(self.initial))


def _float_env(key: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Invalid number in env var {key}: {raw!r}") from None


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    defaults = Settings()
    return Settings(
        rate=_float_env("RATEBUCKET_RATE", defaults.rate),
        capacity=_float_env("RATEBUCKET_CAPACITY", defaults.capacity),
        initial=_float_env("RATEBUCKET_INITIAL", None),
        clock_speed=_float_env("RATEBUCKET_CLOCK_SPEED", defaults.clock_speed),
        log_level=(os.getenv("RATEBUCKET_LOG_LEVEL") or defaults.log_level).upper(),
    )
