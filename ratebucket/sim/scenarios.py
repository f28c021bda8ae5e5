"""Arrival scenario generators."""

from __future__ import annotations

import random
from typing import Iterable


def steady(
    count: int, interval: float, amount: float = 1.0, start: float = 0.0
) -> Iterable[tuple[float, float]]:
    for i in range(count):
        yield start + i * interval, amount


def bursty(
    count: int,
    mean_interval: float,
    amount: float = 1.0,
    burst_prob: float = 0.1,
    burst_size: int = 5,
    start: float = 0.0,
    seed: int | None = None,
) -> Iterable[tuple[float, float]]:
    """Poisson-ish arrivals; with probability ``burst_prob`` an arrival brings
    ``burst_size`` simultaneous requests instead of one.

    A non-positive ``mean_interval`` puts every arrival at ``start``.
    """
    rng = random.Random(seed)
    ts = start
    emitted = 0
    while emitted < count:
        if mean_interval > 0:
            ts += rng.expovariate(1.0 / mean_interval)
        n = burst_size if rng.random() < burst_prob else 1
        for _ in range(min(n, count - emitted)):
            yield ts, amount
            emitted += 1
