import threading

import pytest

from flowevents.pending import EuroscopeTimerTickEvent, PendingEuroscopeEvents


@pytest.fixture
def pending():
    return PendingEuroscopeEvents()


def tick(queue, times=1):
    for _ in range(times):
        queue.on_event(EuroscopeTimerTickEvent())


def test_callbacks_wait_for_tick(pending):
    seen = []
    pending.add_event(lambda: seen.append("a"))
    assert seen == []
    tick(pending)
    assert seen == ["a"]


def test_callbacks_run_in_order_added(pending):
    seen = []
    names = ["first", "second", "third"]
    for name in names:
        pending.add_event(lambda name=name: seen.append(name))
    tick(pending)
    assert seen == names


def test_queue_is_cleared_after_tick(pending):
    seen = []
    pending.add_event(lambda: seen.append("x"))
    tick(pending, times=2)
    assert seen == ["x"]
    assert len(pending) == 0


def test_length_counts_waiting_callbacks(pending):
    pending.add_event(lambda: None)
    pending.add_event(lambda: None)
    assert len(pending) == 2


def test_callbacks_added_from_many_threads_all_run(pending):
    seen = []
    guard = threading.Lock()

    def record(index):
        with guard:
            seen.append(index)

    workers = [
        threading.Thread(target=pending.add_event, args=(lambda i=i: record(i),)) for i in range(20)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    assert len(pending) == 20
    tick(pending)
    assert len(pending) == 0
    assert sorted(seen) == list(range(20))


def test_callback_added_during_tick_runs_on_next_tick(pending):
    seen = []
    pending.add_event(lambda: pending.add_event(lambda: seen.append("later")))
    tick(pending)
    assert seen == []
    tick(pending)
    assert seen == ["later"]