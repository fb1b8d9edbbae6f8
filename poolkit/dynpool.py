"""A thread pool that grows by a fixed step, up to a limit, when all workers are busy."""

from __future__ import annotations

import threading
from typing import Callable, Optional

from .threadpool import Task, ThreadPool

GROW_STEP = 10

EventCallback = Callable[[str], None]


class DynamicPool(ThreadPool):
    """Thread pool that adds workers when every one of them is busy.

    Each growth is reported to ``on_event`` as ``"resize-to:<n>"``, with
    ``". max!"`` appended when the limit was reached.
    """

    def __init__(
        self,
        initial_threads: int,
        max_threads: int,
        on_event: Optional[EventCallback] = None,
    ) -> None:
        if max_threads < initial_threads:
            raise ValueError("max_threads must be at least initial_threads")
        super().__init__(initial_threads)
        self.max_threads = max_threads
        self._on_event = on_event
        self._schedule_lock = threading.Lock()

    def schedule(self, task: Task) -> bool:
        """Grow the pool if all workers are busy, then queue the task."""
        with self._schedule_lock:
            curr_size = self.size()
            curr_active = self.active()
            if curr_active >= curr_size and curr_size < self.max_threads:
                new_size = curr_size + GROW_STEP
                at_max = False
                if new_size > self.max_threads:
                    new_size = self.max_threads
                    at_max = True
                self.resize(new_size)
                message = f"resize-to:{self.size()}"
                if at_max:
                    message += ". max!"
                self._emit(message)
            return super().schedule(task)

    def _emit(self, message: str) -> None:
        if self._on_event is not None:
            self._on_event(message)