"""A persistent pool of worker threads that splits an index range and sums partial results."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, TypeVar

from visodom.settings import NUM_THREADS

logger = logging.getLogger(__name__)

R = TypeVar("R")


class IndexThreadReduce(Generic[R]):
    """Run ``func(start, end, stats, thread_id)`` over chunks of an index range on worker threads.

    ``factory`` creates a fresh zero accumulator; each call fills its own
    accumulator, and the partial results are summed with ``+=`` into ``stats``.
    Every worker is called at least once per reduce, with the empty range (0, 0)
    when no chunk was left for it.
    """

    def __init__(self, factory: Callable[[], R], num_threads: int = NUM_THREADS) -> None:
        if num_threads < 1:
            raise ValueError("at least one worker thread is required")
        self._factory = factory
        self._num_threads = num_threads
        self.stats: R = factory()

        self._cond = threading.Condition()
        self._reduce_lock = threading.Lock()
        self._func: Callable[[int, int, R, int], None] | None = None
        self._next_index = 0
        self._max_index = 0
        self._step_size = 1
        self._running = True
        self._error: BaseException | None = None
        self._is_done = [False] * num_threads
        self._got_one = [True] * num_threads

        self._threads = [
            threading.Thread(target=self._worker, args=(idx,), daemon=True)
            for idx in range(num_threads)
        ]
        for thread in self._threads:
            thread.start()

    def reduce(
        self,
        func: Callable[[int, int, R, int], None],
        first: int,
        end: int,
        step_size: int = 0,
    ) -> R:
        """Process indices ``first..end-1`` in chunks of ``step_size`` and return the summed stats.

        A ``step_size`` of 0 splits the range evenly over the workers. An exception
        raised by ``func`` is re-raised here once all workers have finished.
        """
        if step_size < 0:
            raise ValueError("step size must not be negative")
        if step_size == 0:
            step_size = max(1, ((end - first) + self._num_threads - 1) // self._num_threads)

        with self._reduce_lock, self._cond:
            if not self._running:
                raise RuntimeError("reduce called on a closed IndexThreadReduce")
            self.stats = self._factory()
            self._func = func
            self._next_index = first
            self._max_index = end
            self._step_size = step_size
            self._error = None
            self._is_done = [False] * self._num_threads
            self._got_one = [False] * self._num_threads
            self._cond.notify_all()

            self._cond.wait_for(lambda: all(self._is_done) or not self._running)

            self._next_index = 0
            self._max_index = 0
            self._func = None
            error, self._error = self._error, None

        if error is not None:
            raise error
        return self.stats

    def _worker(self, idx: int) -> None:
        with self._cond:
            while self._running:
                if self._next_index < self._max_index:
                    start = self._next_index
                    self._next_index += self._step_size
                    job = (start, min(start + self._step_size, self._max_index))
                elif not self._got_one[idx]:
                    job = (0, 0)
                else:
                    self._is_done[idx] = True
                    self._cond.notify_all()
                    self._cond.wait_for(lambda: not self._running or not self._is_done[idx])
                    continue

                func = self._func
                self._cond.release()
                partial = None
                error: BaseException | None = None
                try:
                    partial = self._factory()
                    func(job[0], job[1], partial, idx)
                except BaseException as exc:  # handed back to the caller of reduce
                    error = exc
                finally:
                    self._cond.acquire()

                self._got_one[idx] = True
                if error is not None:
                    if self._error is None:
                        self._error = error
                else:
                    self.stats += partial

    def close(self) -> None:
        """Stop and join all worker threads; further reduce calls raise RuntimeError."""
        with self._cond:
            if not self._running:
                return
            self._running = False
            self._cond.notify_all()
        for thread in self._threads:
            thread.join()
        logger.debug("destroyed ThreadReduce")

    def __enter__(self) -> IndexThreadReduce[R]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()