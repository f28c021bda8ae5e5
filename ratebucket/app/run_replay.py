"""Entry point for simulated-time traffic replays."""

from __future__ import annotations

import logging

from .main import build_environment, configure_logging
from ..config import load_settings
from ..core.clock import SimClock
from ..sim.engine import run_take
from ..sim.scenarios import bursty

logger = logging.getLogger(__name__)


def main():  # pragma: no cover - manual run
    settings = load_settings()
    configure_logging(settings)
    bucket, _ = build_environment(settings, SimClock())
    # requests of capacity/8 tokens arriving about twice as fast as the rate allows
    amount = settings.capacity / 8
    scenario = bursty(
        count=500, mean_interval=amount / settings.rate / 2, amount=amount, seed=42
    )
    report = run_take(bucket, scenario)
    logger.info("Replay done: %s, acceptance %.2f", report, report.acceptance_ratio() or 0.0)


if __name__ == "__main__":  # pragma: no cover
    main()
