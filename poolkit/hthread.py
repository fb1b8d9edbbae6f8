"""A controllable worker thread that repeats a task with a sleep policy."""

from __future__ import annotations

import enum
import threading
import time
from typing import Callable, Optional


class Status(enum.Enum):
    STOP = 0
    RUNNING = 1
    PAUSE = 2


class SleepPolicy(enum.Enum):
    YIELD = 0
    SLEEP_FOR = 1
    SLEEP_UNTIL = 2
    NO_SLEEP = 3


class HThread:
    """Runs ``do_task`` repeatedly on its own thread until stopped.

    Subclasses override ``do_prepare``, ``do_task`` and ``do_finish``, or
    ``run`` for full control; alternatively assign a callable to ``task``
    and the default ``do_task`` calls it. Between tasks the thread yields,
    sleeps for ``sleep_ms``, sleeps until the next ``sleep_ms`` tick, or
    does not sleep.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._status = Status.STOP
        self._status_changed = False
        self._stop_requested = False
        self._base_tp = 0.0
        self.dotask_cnt = 0
        self.sleep_policy = SleepPolicy.YIELD
        self.sleep_ms = 0
        self.task: Optional[Callable[[], object]] = None
        self.thread: Optional[threading.Thread] = None

    @property
    def status(self) -> Status:
        return self._status

    def _set_status(self, status: Status) -> None:
        with self._cond:
            self._status_changed = True
            self._status = status
            self._cond.notify_all()

    def set_sleep_policy(self, policy: SleepPolicy, ms: int = 0) -> None:
        self.sleep_policy = SleepPolicy(policy)
        self.sleep_ms = ms
        self._set_status(self._status)

    def start(self) -> None:
        """Start the thread if it is stopped."""
        with self._cond:
            if self._status is not Status.STOP:
                return
            if self.thread is not None and self.thread.is_alive():
                return
            self._stop_requested = False
            self.thread = threading.Thread(target=self._main, daemon=True)
            self.thread.start()

    def _main(self) -> None:
        if not self.do_prepare():
            return
        with self._cond:
            if not self._stop_requested:
                self._status_changed = True
                self._status = Status.RUNNING
                self._cond.notify_all()
        self.run()
        self._set_status(Status.STOP)
        self.do_finish()

    def stop(self) -> None:
        """Stop the thread and wait for it to end."""
        with self._cond:
            self._stop_requested = True
            if self._status is not Status.STOP:
                self._status_changed = True
                self._status = Status.STOP
                self._cond.notify_all()
        thread = self.thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def pause(self) -> None:
        with self._cond:
            if self._status is Status.RUNNING:
                self._status_changed = True
                self._status = Status.PAUSE
                self._cond.notify_all()

    def resume(self) -> None:
        with self._cond:
            if self._status is Status.PAUSE:
                self._status_changed = True
                self._status = Status.RUNNING
                self._cond.notify_all()

    def run(self) -> None:
        """Repeat ``do_task`` until stopped, waiting while paused."""
        while self._status is not Status.STOP:
            with self._cond:
                self._cond.wait_for(lambda: self._status is not Status.PAUSE)
                if self._status is Status.STOP:
                    break
            self.do_task()
            self.dotask_cnt += 1
            self._sleep()

    def do_prepare(self) -> bool:
        return True

    def do_task(self) -> None:
        """Call the assigned ``task`` callable, if any."""
        task = self.task
        if task is not None:
            task()

    def do_finish(self) -> bool:
        return True

    def _sleep(self) -> None:
        policy = self.sleep_policy
        if policy is SleepPolicy.YIELD:
            time.sleep(0)
        elif policy is SleepPolicy.SLEEP_FOR:
            with self._cond:
                self._cond.wait_for(
                    lambda: self._status is Status.STOP, self.sleep_ms / 1000
                )
        elif policy is SleepPolicy.SLEEP_UNTIL:
            with self._cond:
                if self._status_changed:
                    self._status_changed = False
                    self._base_tp = time.monotonic()
                self._base_tp += self.sleep_ms / 1000
                remaining = max(0.0, self._base_tp - time.monotonic())
                self._cond.wait_for(lambda: self._status is Status.STOP, remaining)