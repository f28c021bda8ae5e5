"""Construction options for TokenBucket.

An option is any callable taking ``(bucket, now)``; options run in order after
the bucket has been created full.
"""

from __future__ import annotations

from .bucket import Option, TokenBucket


def with_value(value: float) -> Option:
    """Start the bucket at ``value`` instead of full."""

    def apply(bucket: TokenBucket, now: float):
        bucket.set(now, value)

    return apply
