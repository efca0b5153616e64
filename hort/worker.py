"""A background task queue run by worker threads, with a progress bar."""

from __future__ import annotations

import queue
import sys
import threading
import time
from typing import Any, Callable, TextIO

_STOP = object()
_BAR = "|" * 60
_BAR_WIDTH = 60


class Worker:
    """Runs pushed callbacks in order on background threads.

    Exceptions raised by callbacks are collected in ``errors``.
    """

    def __init__(self, threads: int = 1) -> None:
        if threads < 1:
            raise ValueError("a worker needs at least one thread")
        self._queue: queue.Queue[Any] = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._pending = 0
        self.total = 0
        self.completed = 0
        self.errors: list[BaseException] = []
        self._threads = [
            threading.Thread(target=self._run, daemon=True) for _ in range(threads)
        ]
        for thread in self._threads:
            thread.start()

    def _run(self) -> None:
        while True:
            callback = self._queue.get()
            if callback is _STOP:
                return
            with self._lock:
                self._pending -= 1
            try:
                callback()
            except Exception as error:  # noqa: BLE001
                with self._lock:
                    self.errors.append(error)
            finally:
                with self._lock:
                    self.completed += 1

    def push(self, callback: Callable[[], Any]) -> None:
        """Queue ``callback`` to be run."""
        with self._lock:
            if self._closed:
                raise RuntimeError("worker is closed")
            self.total += 1
            self._pending += 1
            self._queue.put(callback)

    def close(self) -> None:
        """Stop accepting tasks; queued tasks still run."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            for _ in self._threads:
                self._queue.put(_STOP)

    def join(self) -> None:
        """Close the worker and wait until every queued task has run."""
        self.close()
        for thread in self._threads:
            thread.join()

    def _bar(self) -> str:
        with self._lock:
            completed, total = self.completed, self.total
        fraction = min(max(completed / total, 0.0), 100.0) if total else 0.0
        left = int(fraction * _BAR_WIDTH)
        right = _BAR_WIDTH - left
        return f"\r{int(fraction * 100):3d}% [{_BAR[:left]}{' ' * right}] {completed}/{total}"

    def progress(self, stream: TextIO | None = None) -> None:
        """Draw a progress bar until no task is left waiting in the queue."""
        out = stream if stream is not None else sys.stdout
        while True:
            with self._lock:
                if self._pending <= 0:
                    return
            out.write(self._bar())
            out.flush()
            time.sleep(0.1)

    def __enter__(self) -> Worker:
        return self

    def __exit__(self, *args: object) -> None:
        self.join()