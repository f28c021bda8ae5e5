from prometheus_client import REGISTRY

from ratebucket.core.clock import SimClock
from ratebucket.flow.writer import DiscardSink, PacedWriter
from ratebucket.io.metrics import record_take
from ratebucket.limiter.bucket import TokenBucket


def _sample(name):
    return REGISTRY.get_sample_value(name) or 0.0


def test_record_take_counts_tokens_and_rejections():
    taken = _sample("ratebucket_tokens_taken_total")
    rejected = _sample("ratebucket_takes_rejected_total")
    record_take(3, True)
    record_take(7, False)
    assert _sample("ratebucket_tokens_taken_total") == taken + 3
    assert _sample("ratebucket_takes_rejected_total") == rejected + 1


def test_paced_writer_records_borrow_waits():
    borrowed = _sample("ratebucket_tokens_borrowed_total")
    waits = _sample("ratebucket_borrow_wait_seconds_count")
    PacedWriter(TokenBucket(0.0, 10, 10), DiscardSink(), SimClock()).write(bytes(30))
    assert _sample("ratebucket_tokens_borrowed_total") == borrowed + 30
    assert _sample("ratebucket_borrow_wait_seconds_count") == waits + 3
