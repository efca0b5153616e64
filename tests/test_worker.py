import io
import threading

import pytest

from hort.worker import Worker


def test_tasks_run_in_order():
    results = []
    worker = Worker()
    for value in range(20):
        worker.push(lambda value=value: results.append(value))
    worker.join()
    assert results == list(range(20))
    assert worker.completed == worker.total == 20


def test_context_manager_waits_for_tasks():
    results = []
    with Worker(threads=3) as worker:
        for value in range(10):
            worker.push(lambda value=value: results.append(value))
    assert sorted(results) == list(range(10))
    assert worker.completed == 10


def test_push_after_close_raises():
    worker = Worker()
    worker.close()
    with pytest.raises(RuntimeError):
        worker.push(lambda: None)
    worker.join()


def test_errors_are_collected_and_work_continues():
    results = []

    def fail():
        raise KeyError("boom")

    worker = Worker()
    worker.push(fail)
    worker.push(lambda: results.append("after"))
    worker.join()
    assert results == ["after"]
    assert len(worker.errors) == 1
    assert isinstance(worker.errors[0], KeyError)
    assert worker.completed == 2


def test_invalid_thread_count():
    with pytest.raises(ValueError):
        Worker(threads=0)


def test_progress_reports_initial_state():
    gate = threading.Event()
    worker = Worker()
    worker.push(gate.wait)
    worker.push(lambda: None)
    timer = threading.Timer(0.3, gate.set)
    timer.start()
    out = io.StringIO()
    worker.progress(out)
    worker.join()
    timer.join()
    assert out.getvalue().startswith("\r  0% [" + " " * 60 + "] 0/2")
    assert worker.completed == 2


def test_progress_returns_when_nothing_queued():
    worker = Worker()
    out = io.StringIO()
    worker.progress(out)
    worker.join()
    assert out.getvalue() == ""