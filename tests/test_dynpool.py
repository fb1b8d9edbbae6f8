import threading

import pytest

from poolkit.dynpool import DynamicPool


def _occupy(pool, count, gate):
    started = threading.Semaphore(0)

    def blocker():
        started.release()
        gate.wait()

    for _ in range(count):
        pool.schedule(blocker)
    for _ in range(count):
        assert started.acquire(timeout=5)


def test_grows_to_max_and_reports():
    events = []
    gate = threading.Event()
    pool = DynamicPool(2, 5, events.append)
    try:
        assert pool.wait(timeout=5)
        _occupy(pool, 2, gate)
        assert events == []
        pool.schedule(lambda: None)
        assert events == ["resize-to:5. max!"]
        assert pool.size() == 5
    finally:
        gate.set()
        pool.shutdown()


def test_grows_below_max_without_max_marker():
    events = []
    gate = threading.Event()
    pool = DynamicPool(2, 50, events.append)
    try:
        assert pool.wait(timeout=5)
        _occupy(pool, 2, gate)
        pool.schedule(lambda: None)
        assert len(events) == 1
        assert events[0] == f"resize-to:{pool.size()}"
        assert 2 < pool.size() < 50
    finally:
        gate.set()
        pool.shutdown()


def test_no_growth_at_max():
    events = []
    gate = threading.Event()
    pool = DynamicPool(2, 2, events.append)
    try:
        assert pool.wait(timeout=5)
        _occupy(pool, 2, gate)
        assert pool.schedule(lambda: None) is True
        assert events == []
        assert pool.size() == 2
    finally:
        gate.set()
        pool.shutdown()


def test_growth_without_callback():
    gate = threading.Event()
    pool = DynamicPool(1, 3)
    try:
        assert pool.wait(timeout=5)
        _occupy(pool, 1, gate)
        pool.schedule(lambda: None)
        assert pool.size() == 3
    finally:
        gate.set()
        pool.shutdown()


def test_all_tasks_complete_and_size_bounded():
    results = []
    lock = threading.Lock()
    with DynamicPool(1, 3) as pool:
        for i in range(20):
            pool.schedule(lambda i=i: (lock.acquire(), results.append(i), lock.release()))
        assert pool.wait(timeout=5)
        assert pool.size() <= 3
    assert sorted(results) == list(range(20))


def test_max_below_initial_rejected():
    with pytest.raises(ValueError):
        DynamicPool(4, 2)