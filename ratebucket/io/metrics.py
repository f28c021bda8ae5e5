"""Metrics instrumentation for rate-limited flows."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

tokens_taken_total = Counter(
    "ratebucket_tokens_taken_total", "Tokens granted by take()"
)
takes_rejected_total = Counter(
    "ratebucket_takes_rejected_total", "take() calls refused for lack of tokens"
)
tokens_borrowed_total = Counter(
    "ratebucket_tokens_borrowed_total", "Tokens overdrawn through borrow()"
)
borrow_wait_seconds = Histogram(
    "ratebucket_borrow_wait_seconds",
    "Wait advised by borrow()",
    buckets=(0.0, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)


def record_take(amount: float, ok: bool) -> None:
    if ok:
        tokens_taken_total.inc(max(0.0, amount))
    else:
        takes_rejected_total.inc()


def record_borrow(amount: float, wait: float) -> None:
    tokens_borrowed_total.inc(max(0.0, amount))
    borrow_wait_seconds.observe(wait)
