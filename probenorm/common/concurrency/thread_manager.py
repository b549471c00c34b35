# probenorm/common/concurrency/thread_manager.py
from __future__ import annotations

import logging
import os
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Generator, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")

log = logging.getLogger(__name__)


@dataclass
class ThreadStats:
    start_ts: float
    tasks_submitted: int = 0
    tasks_completed: int = 0
    tasks_failed: int = 0

    @property
    def in_flight(self) -> int:
        return max(0, self.tasks_submitted - (self.tasks_completed + self.tasks_failed))


class ThreadManager(Generic[T, R]):
    """
    Bounded thread pool for I/O-bound fan-out (one ffprobe call per file).

    - submit(fn, *args) -> Future, with backpressure when max_queue is set
    - imap_unordered(fn, items) -> yields results as they complete
    - stats() -> snapshot of submitted/completed/failed counters

    Normalization itself is pure CPU work and cheap; the pool exists for the
    subprocess wait, not for the rules.
    """

    def __init__(
        self,
        name: str = "probe",
        max_workers: Optional[int] = None,
        max_queue: Optional[int] = None,
    ) -> None:
        if max_workers is None:
            max_workers = max(4, min(8, (os.cpu_count() or 4) * 2))

        self._name = name
        self._max_workers = max_workers
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=name)
        self._stats = ThreadStats(start_ts=time.time())
        self._slots = threading.Semaphore(max_queue) if max_queue and max_queue > 0 else None
        self._closed = False
        self._lock = threading.Lock()

    # ---- lifecycle ------------------------------------------------------------
    def shutdown(self, wait: bool = True, cancel_futures: bool = False) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=wait, cancel_futures=cancel_futures)

    def __enter__(self) -> "ThreadManager[T, R]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True, cancel_futures=True)

    def stats(self) -> ThreadStats:
        with self._lock:
            return ThreadStats(
                start_ts=self._stats.start_ts,
                tasks_submitted=self._stats.tasks_submitted,
                tasks_completed=self._stats.tasks_completed,
                tasks_failed=self._stats.tasks_failed,
            )

    # ---- submission -----------------------------------------------------------
    def submit(self, fn: Callable[..., R], /, *args, **kwargs) -> Future[R]:
        if self._closed:
            raise RuntimeError(f"{self._name}: submit() after shutdown")

        if self._slots is not None:
            self._slots.acquire()

        def _run(*a, **kw) -> R:
            try:
                return fn(*a, **kw)
            finally:
                if self._slots is not None:
                    self._slots.release()

        with self._lock:
            self._stats.tasks_submitted += 1

        fut: Future[R] = self._executor.submit(_run, *args, **kwargs)
        fut.add_done_callback(self._count)
        return fut

    def _count(self, fut: Future) -> None:
        failed = fut.exception() is not None
        with self._lock:
            if failed:
                self._stats.tasks_failed += 1
            else:
                self._stats.tasks_completed += 1
        if failed:
            log.debug("%s task failed: %s", self._name, fut.exception())

    def imap_unordered(self, fn: Callable[[T], R], items: Iterable[T]) -> Generator[R, None, None]:
        """
        Yield results as tasks finish, keeping at most 2x workers in flight.
        Exceptions raised by `fn` propagate to the caller on the matching yield.
        """
        if self._closed:
            raise RuntimeError(f"{self._name}: imap_unordered() after shutdown")

        window = self._max_workers * 2
        inflight: List[Future[R]] = []
        it = iter(items)

        def _fill() -> None:
            while len(inflight) < window:
                try:
                    item = next(it)
                except StopIteration:
                    break
                inflight.append(self.submit(fn, item))

        _fill()
        while inflight:
            done = next(as_completed(inflight))
            inflight.remove(done)
            _fill()
            yield done.result()
