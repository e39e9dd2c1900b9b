import logging

from _pytest.logging import LogCaptureFixture

from either_utils import (
    Failure,
    Pair,
    Success,
    failures,
    lift_map,
    lift_with_value,
    partition,
    successes,
)


def times_ten(x: int) -> int:
    if x % 2 == 0:
        raise ValueError(f"I don't like even numbers: {x}")
    return x * 10


def test_successes_and_failures():
    results = [lift_with_value(times_ten)(n) for n in [1, 2, 3, 4, 5]]
    assert successes(results) == [10, 30, 50]
    fs = failures(results)
    assert [p.second for p in fs] == [2, 4]
    assert all(isinstance(p.first, ValueError) for p in fs)


def test_partition():
    oks, errs = partition(iter([Success(1), Failure("a"), Success(None), Failure("b")]))
    assert oks == [1, None]
    assert errs == ["a", "b"]


def test_partition__deterministic():
    results = lift_map(times_ten, [1, 2, 3, 4, 5])
    assert partition(results) == partition(results)
    assert partition(results) == (successes(results), failures(results))


def test_partition__empty():
    assert partition([]) == ([], [])
    assert successes([]) == []
    assert failures([]) == []


def test_lift_map__with_value():
    results = lift_map(times_ten, [1, 2, 3, 4, 5])
    assert len(results) == 5
    assert successes(results) == [10, 30, 50]
    assert [p.second for p in failures(results)] == [2, 4]
    assert all(isinstance(p, Pair) for p in failures(results))


def test_lift_map__without_value():
    results = lift_map(times_ten, [1, 2, 3], with_value=False)
    assert results[0] == Success(10)
    assert isinstance(results[1].get_failure(), ValueError)
    assert results[2] == Success(30)


def test_lift_map__generator_and_progress():
    results = lift_map(times_ten, (n for n in range(1, 6)), progress=True)
    assert successes(results) == [10, 30, 50]


def test_lift_map__logs_stats(caplog: LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="either_utils")
    lift_map(times_ten, [1, 2, 3, 4, 5], label="odd numbers")
    assert any(m.startswith("odd numbers took ") for m in caplog.messages)
    assert "odd numbers: 3 succeeded, 2 failed" in caplog.messages


def test_lift_map__no_label_no_logs(caplog: LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="either_utils")
    lift_map(times_ten, [1, 2])
    assert caplog.messages == []
