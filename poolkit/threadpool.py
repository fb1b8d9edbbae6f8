"""A FIFO thread pool with resizable worker count and selectable shutdown policy."""

from __future__ import annotations

import enum
import logging
import threading
from collections import deque
from typing import Any, Callable, Deque, Optional, Set

_log = logging.getLogger(__name__)

Task = Callable[[], Any]


class ShutdownPolicy(enum.Enum):
    """What the pool does with outstanding work when it is shut down."""

    WAIT_FOR_ALL_TASKS = "wait_for_all_tasks"
    WAIT_FOR_ACTIVE_TASKS = "wait_for_active_tasks"
    IMMEDIATELY = "immediately"


class ScopeGuard:
    """Calls a function when its block is left, unless it was disabled first."""

    def __init__(self, callback: Optional[Callable[[], Any]]) -> None:
        self._callback = callback
        self._active = True

    def disable(self) -> None:
        self._active = False

    def __enter__(self) -> "ScopeGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._active and self._callback is not None:
            self._callback()


class LockedRef:
    """Holds a lock for the duration of a block and hands out the guarded object."""

    def __init__(self, obj: Any, lock: Any) -> None:
        self._obj = obj
        self._lock = lock

    def __enter__(self) -> Any:
        self._lock.acquire()
        return self._obj

    def __exit__(self, exc_type, exc, tb) -> None:
        self._lock.release()


class ThreadPool:
    """Runs scheduled callables on a set of worker threads in FIFO order.

    Exceptions raised by tasks are logged and otherwise ignored.
    """

    def __init__(
        self,
        initial_threads: int = 0,
        shutdown_policy: ShutdownPolicy = ShutdownPolicy.WAIT_FOR_ALL_TASKS,
    ) -> None:
        if initial_threads < 0:
            raise ValueError("initial_threads must not be negative")
        self._policy = ShutdownPolicy(shutdown_policy)
        self._tasks: Deque[Task] = deque()
        self._lock = threading.Lock()
        self._task_or_terminate = threading.Condition(self._lock)
        self._idle_or_terminated = threading.Condition(self._lock)
        self._worker_count = 0
        self._target_worker_count = 0
        self._active_worker_count = 0
        self._terminating = False
        self._shut_down = False
        self._threads: Set[threading.Thread] = set()
        self.resize(initial_threads)

    # -- queries -------------------------------------------------------

    def size(self) -> int:
        """Number of worker threads currently in the pool."""
        with self._lock:
            return self._worker_count

    def active(self) -> int:
        """Number of workers that are not idle."""
        with self._lock:
            return self._active_worker_count

    def pending(self) -> int:
        """Number of tasks waiting to be executed."""
        with LockedRef(self._tasks, self._lock) as tasks:
            return len(tasks)

    def empty(self) -> bool:
        """True if no task is waiting to be executed."""
        with LockedRef(self._tasks, self._lock) as tasks:
            return not tasks

    # -- control -------------------------------------------------------

    def resize(self, size: int) -> bool:
        """Set the number of workers; surplus workers leave once idle."""
        if size < 0:
            raise ValueError("size must not be negative")
        with self._lock:
            if self._terminating:
                return False
            self._target_worker_count = size
            if self._worker_count <= size:
                while self._worker_count < size:
                    self._worker_count += 1
                    self._active_worker_count += 1
                    self._spawn_worker()
            else:
                self._task_or_terminate.notify_all()
            return True

    def schedule(self, task: Task) -> bool:
        """Queue a task for execution; False once the pool is shutting down."""
        if not callable(task):
            raise TypeError("task must be callable")
        with self._lock:
            if self._terminating:
                return False
            self._tasks.append(task)
            self._task_or_terminate.notify()
            return True

    def clear(self) -> None:
        """Drop every pending task."""
        with LockedRef(self._tasks, self._lock) as tasks:
            tasks.clear()
            self._idle_or_terminated.notify_all()

    def wait(self, task_threshold: int = 0, timeout: Optional[float] = None) -> bool:
        """Block until active plus pending tasks drop to the threshold.

        Returns False if the timeout ran out first.
        """
        with self._lock:
            return self._idle_or_terminated.wait_for(
                lambda: self._active_worker_count + len(self._tasks) <= task_threshold,
                timeout,
            )

    def shutdown(self) -> None:
        """Stop the pool according to its shutdown policy. Idempotent."""
        with self._lock:
            if self._shut_down:
                return
            self._shut_down = True
        if self._policy is ShutdownPolicy.WAIT_FOR_ALL_TASKS:
            self.wait()
            self._terminate_all_workers(wait=True)
        elif self._policy is ShutdownPolicy.WAIT_FOR_ACTIVE_TASKS:
            self.clear()
            self.wait()
            self._terminate_all_workers(wait=True)
        else:
            self.clear()
            self._terminate_all_workers(wait=False)

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    # -- workers -------------------------------------------------------

    def _spawn_worker(self) -> None:
        thread = threading.Thread(target=self._run_worker, daemon=True)
        self._threads.add(thread)
        thread.start()

    def _run_worker(self) -> None:
        guard = ScopeGuard(self._worker_died_unexpectedly)
        with guard:
            while self._execute_task():
                pass
            guard.disable()
        self._worker_destructed()

    def _leave(self) -> bool:
        self._worker_count -= 1
        self._active_worker_count -= 1
        self._idle_or_terminated.notify_all()
        return False

    def _execute_task(self) -> bool:
        with self._lock:
            if self._worker_count > self._target_worker_count:
                return self._leave()
            while not self._tasks:
                if self._worker_count > self._target_worker_count:
                    return self._leave()
                self._active_worker_count -= 1
                self._idle_or_terminated.notify_all()
                self._task_or_terminate.wait()
                self._active_worker_count += 1
            task = self._tasks.popleft()
        try:
            task()
        except Exception:
            _log.exception("task raised an exception")
        return True

    def _worker_destructed(self) -> None:
        with self._lock:
            self._threads.discard(threading.current_thread())
            self._idle_or_terminated.notify_all()

    def _worker_died_unexpectedly(self) -> None:
        with self._lock:
            self._threads.discard(threading.current_thread())
            self._worker_count -= 1
            self._active_worker_count -= 1
            if self._terminating:
                self._idle_or_terminated.notify_all()
            else:
                self._worker_count += 1
                self._active_worker_count += 1
                self._spawn_worker()

    def _terminate_all_workers(self, wait: bool) -> None:
        with self._lock:
            self._terminating = True
            self._target_worker_count = 0
            self._task_or_terminate.notify_all()
            if not wait:
                return
            self._idle_or_terminated.wait_for(lambda: self._worker_count == 0)
            threads = list(self._threads)
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()