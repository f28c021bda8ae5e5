from ratebucket.limiter.bucket import TokenBucket
from ratebucket.limiter.options import with_value
from ratebucket.sim.engine import ReplayReport, run_borrow, run_take
from ratebucket.sim.scenarios import bursty, steady


def test_steady_scenario_spacing():
    assert list(steady(3, 0.5, amount=2, start=10)) == [
        (10.0, 2),
        (10.5, 2),
        (11.0, 2),
    ]


def test_bursty_is_deterministic_and_ordered():
    a = list(bursty(200, 0.1, seed=7))
    b = list(bursty(200, 0.1, seed=7))
    assert a == b
    assert len(a) == 200
    times = [ts for ts, _ in a]
    assert times == sorted(times)


def test_bursty_emits_simultaneous_arrivals():
    arrivals = list(bursty(100, 1.0, burst_prob=1.0, burst_size=4, seed=1))
    times = [ts for ts, _ in arrivals]
    assert len(set(times)) == 25


def test_run_take_against_steady_overload():
    # 4 req/s offered against 2 tokens/s with a burst of 2
    bucket = TokenBucket(0.0, 2, 2)
    report = run_take(bucket, steady(8, 0.25))
    assert report.accepted == 5
    assert report.rejected == 3
    assert report.accepted_amount == 5
    assert report.acceptance_ratio() == 5 / 8


def test_run_borrow_accumulates_waits():
    bucket = TokenBucket(0.0, 2, 6)
    report = run_borrow(bucket, [(0.0, 4), (0.0, 4), (0.0, 4)])
    assert report.rejected == 0
    assert report.total_wait == 4.0
    assert report.max_wait == 3.0
    assert report.final_value == -6


def test_empty_scenario_report():
    report = run_take(TokenBucket(0.0, 1, 1, with_value(0.5)), [])
    assert report == ReplayReport()
    assert report.acceptance_ratio() is None


def test_bursty_zero_interval_piles_up_at_start():
    assert list(bursty(5, 0, start=3.0, seed=1)) == [(3.0, 1.0)] * 5
