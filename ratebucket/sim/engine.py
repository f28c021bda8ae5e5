"""Replay arrival scenarios against a bucket in simulated time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..io.metrics import record_borrow, record_take
from ..limiter.bucket import TokenBucket

logger = logging.getLogger(__name__)

Scenario = Iterable[tuple[float, float]]  # (ts, amount)


@dataclass
class ReplayReport:
    accepted: int = 0
    rejected: int = 0
    accepted_amount: float = 0.0
    rejected_amount: float = 0.0
    total_wait: float = 0.0
    max_wait: float = 0.0
    final_value: float = 0.0

    def acceptance_ratio(self) -> Optional[float]:
        arrivals = self.accepted + self.rejected
        if arrivals == 0:
            return None
        return self.accepted / arrivals


def run_take(bucket: TokenBucket, scenario: Scenario) -> ReplayReport:
    report = ReplayReport()
    ts = None
    for ts, amount in scenario:
        ok = bucket.take(ts, amount)
        record_take(amount, ok)
        if ok:
            report.accepted += 1
            report.accepted_amount += amount
        else:
            report.rejected += 1
            report.rejected_amount += amount
    if ts is not None:
        report.final_value = bucket.value(ts)
    logger.info(
        "take replay: %d accepted, %d rejected", report.accepted, report.rejected
    )
    return report


def run_borrow(bucket: TokenBucket, scenario: Scenario) -> ReplayReport:
    """Borrow at every arrival; nothing is rejected, waits are accumulated."""
    report = ReplayReport()
    ts = None
    for ts, amount in scenario:
        wait = bucket.borrow(ts, amount)
        record_borrow(amount, wait)
        report.accepted += 1
        report.accepted_amount += amount
        report.total_wait += wait
        report.max_wait = max(report.max_wait, wait)
    if ts is not None:
        report.final_value = bucket.value(ts)
    logger.info(
        "borrow replay: %d arrivals, total wait %.3fs, max wait %.3fs",
        report.accepted,
        report.total_wait,
        report.max_wait,
    )
    return report
