"""Errors raised by rate-limited I/O helpers."""

from __future__ import annotations


class SpeedLimited(Exception):
    """Raised when a write would exceed the bucket's current allowance."""

    def __init__(self, requested: float, available: float):
        super().__init__(
            f"speed limited: requested {requested:g}, available {available:g}"
        )
        self.requested = requested
        self.available = available
