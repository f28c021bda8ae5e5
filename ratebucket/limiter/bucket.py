"""Classic token bucket driven by caller-supplied timestamps.

The bucket holds no clock. Every operation takes ``now`` (float seconds) and
accounts for the time elapsed since the previous update as if tokens had been
added continuously at ``rate`` per second, up to ``capacity``.

If time goes backwards it is ignored as already accounted for, so tokens left
unused in the past cannot be taken once the bucket is full.

Not safe for concurrent use; wrap calls in a lock if you share a bucket.
"""

from __future__ import annotations

from typing import Callable

Option = Callable[["TokenBucket", float], None]


class TokenBucket:
    def __init__(self, now: float, rate: float, capacity: float, *options: Option):
        self._rate = rate
        self._capacity = capacity
        self._value = capacity  # full when created
        self._last = now
        for opt in options:
            opt(self, now)

    def __repr__(self) -> str:
        return (
            f"TokenBucket(rate={self._rate!r}, capacity={self._capacity!r}, "
            f"value={self._value!r}, last={self._last!r})"
        )

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def capacity(self) -> float:
        return self._capacity

    def reconfigure(self, now: float, rate: float, capacity: float):
        """Advance to ``now`` and use the new rate and capacity from then on.

        The current value is neither rescaled nor clamped; only later accrual
        clamps it to the new capacity.
        """
        self._advance(now)
        self._rate = rate
        self._capacity = capacity

    def peek(self, now: float, amount: float) -> bool:
        """Whether at least ``amount`` tokens are available, without taking them."""
        self._advance(now)
        return amount <= self._value

    def take(self, now: float, amount: float) -> bool:
        self._advance(now)
        if amount > self._value:
            return False
        self._value -= amount
        return True

    def borrow(self, now: float, amount: float) -> float:
        """Take ``amount`` tokens even if there are not enough of them.

        Returns the seconds to wait before the borrowed tokens are actually
        available, 0.0 if there were enough. The bucket may go below
        ``-capacity``; callers must cap single borrows against ``capacity``.
        """
        self._advance(now)
        self._value -= amount
        if self._value >= 0:
            return 0.0
        return -self._value / self._rate

    def return_tokens(self, now: float, amount: float):
        """Give back unused borrowed tokens.

        The amount is added before advancing, so anything above capacity is
        truncated together with newly accrued tokens.
        """
        self._value += amount
        self._advance(now)

    def value(self, now: float) -> float:
        """How much can be taken at most at ``now``."""
        self._advance(now)
        return self._value

    def set(self, now: float, value: float) -> float:
        """Drain or fill the bucket. Returns the previous value.

        Time since the last update is discarded, not accrued, and the new value
        is not clamped.
        """
        prev = self._value
        self._value = value
        self._last = now
        return prev

    def _advance(self, now: float):
        elapsed = now - self._last
        if elapsed < 0:
            return
        self._value += self._rate * elapsed
        self._last = now
        if self._value > self._capacity:
            self._value = self._capacity
