"""Fixed-size thread pool draining a pre-filled FIFO of work items."""
from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from common.logging_utils import extra_context, is_debug_enabled

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class WorkerPool(Generic[T, R]):
    """Runs ``process`` over every item with at most ``concurrency`` threads.

    All items are enqueued before the first worker starts. A worker pops
    without blocking and exits as soon as the queue is empty, so ``run``
    returns once every item has been handed to exactly one worker.

    Args:
        concurrency: Upper bound on worker threads.
        cancel_event: When set, workers stop taking new items.
        name: Thread name prefix, shown in logs.
    """

    def __init__(self, concurrency: int, cancel_event: Optional[threading.Event] = None,
                 name: str = "worker"):
        self.concurrency = max(1, int(concurrency))
        self.cancel_event = cancel_event or threading.Event()
        self.name = name
        self.errors = 0
        self._errors_lock = threading.Lock()

    def worker_count(self, task_count: int) -> int:
        if task_count <= 0:
            return 0
        return min(self.concurrency, task_count)

    def run(self, tasks: Sequence[T], process: Callable[[T], R]) -> List[R]:
        """Process all tasks and return the results in completion order."""
        work: "queue.Queue[T]" = queue.Queue()
        for task in tasks:
            work.put(task)

        results: "queue.Queue[R]" = queue.Queue()
        threads = [
            threading.Thread(
                target=self._work,
                args=(work, results, process),
                name=f"{self.name}-{i}",
                daemon=True,
            )
            for i in range(self.worker_count(len(tasks)))
        ]
        if is_debug_enabled(logger):
            logger.debug(
                "Starting workers",
                extra=extra_context(
                    event="function_entry", component="pool", action="run",
                    count=len(tasks), workers=len(threads)
                )
            )

        for thread in threads:
            thread.start()
        try:
            for thread in threads:
                thread.join()
        except KeyboardInterrupt:
            # Let in-flight items finish (bounded by the probe timeout), skip the rest
            self.cancel_event.set()
            for thread in threads:
                thread.join()
            raise

        collected = []
        while not results.empty():
            collected.append(results.get_nowait())
        return collected

    def _work(self, work: "queue.Queue[T]", results: "queue.Queue[R]",
              process: Callable[[T], R]) -> None:
        while not self.cancel_event.is_set():
            try:
                task = work.get_nowait()
            except queue.Empty:
                return
            try:
                results.put(process(task))
            except Exception:  # pylint: disable=broad-exception-caught
                # One broken task must not stop the others
                logger.exception("Unhandled error while processing %r", task)
                with self._errors_lock:
                    self.errors += 1
