"""Entry point pacing a payload through a PacedWriter on the wall clock."""

from __future__ import annotations

import logging

from .main import build_environment, configure_logging
from ..config import load_settings
from ..flow.writer import CallbackSink, PacedWriter

logger = logging.getLogger(__name__)


def main():  # pragma: no cover - manual run
    settings = load_settings()
    configure_logging(settings)
    bucket, clock = build_environment(settings)
    start = clock.now()

    def emit(chunk: bytes) -> int:
        logger.info("%5d bytes written at %.2fs", len(chunk), clock.now() - start)
        return len(chunk)

    writer = PacedWriter(bucket, CallbackSink(emit), clock)
    n = writer.write(bytes(int(settings.rate * 5)))
    logger.info("Finished pacing %d bytes", n)


if __name__ == "__main__":  # pragma: no cover
    main()
