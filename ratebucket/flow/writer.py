"""Byte writers throttled by a TokenBucket.

Two flavours:
- LimitedWriter rejects a write outright when the bucket can't cover it.
- PacedWriter borrows ahead and sleeps on the clock until the overdraft settles.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from ..core.errors import SpeedLimited
from ..io.metrics import record_borrow, record_take
from ..limiter.bucket import TokenBucket

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now(self) -> float: ...

    def sleep(self, seconds: float): ...


class Sink(Protocol):
    def write(self, data: bytes) -> int: ...


class CallbackSink:
    def __init__(self, fn: Callable[[bytes], int]):
        self.fn = fn

    def write(self, data: bytes) -> int:
        return self.fn(data)


class DiscardSink:
    def write(self, data: bytes) -> int:
        return len(data)


class LimitedWriter:
    def __init__(self, bucket: TokenBucket, sink: Sink, clock: Clock):
        self.bucket = bucket
        self.sink = sink
        self.clock = clock

    def write(self, data: bytes) -> int:
        now = self.clock.now()
        size = float(len(data))
        ok = self.bucket.take(now, size)
        record_take(size, ok)
        if not ok:
            available = self.bucket.value(now)
            logger.debug("write of %d bytes refused, %.1f available", len(data), available)
            raise SpeedLimited(size, available)
        return self.sink.write(data)


class PacedWriter:
    def __init__(self, bucket: TokenBucket, sink: Sink, clock: Clock):
        self.bucket = bucket
        self.sink = sink
        self.clock = clock

    def chunk_size(self) -> int:
        # a single borrow never exceeds the burst capacity
        return max(1, int(self.bucket.capacity))

    def write(self, data: bytes) -> int:
        n = 0
        while n < len(data):
            lim = min(self.chunk_size(), len(data) - n)
            delay = self.bucket.borrow(self.clock.now(), float(lim))
            record_borrow(float(lim), delay)
            if delay > 0:
                logger.debug("borrowed %d bytes, waiting %.3fs", lim, delay)
                self.clock.sleep(delay)
            # sinks may report nothing, or more than they were handed
            m = min(max(self.sink.write(data[n : n + lim]) or 0, 0), lim)
            if m < lim:
                self.bucket.return_tokens(self.clock.now(), float(lim - m))
            if m <= 0:
                logger.warning("sink accepted no bytes, stopping at %d/%d", n, len(data))
                break
            n += m
        return n
