"""Connection pool and per-request bookkeeping for an asynchronous HTTP client."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Optional

INVALID_TIMER_ID = (1 << 64) - 1

ResponseCallback = Callable[[Any], None]


class ConnPool:
    """FIFO store of idle connections."""

    def __init__(self) -> None:
        self._conns: Deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._conns)

    def get(self) -> Optional[Any]:
        """Take the oldest connection, or None if the pool is empty."""
        return self._conns.popleft() if self._conns else None

    def add(self, conn: Any) -> None:
        self._conns.append(conn)

    def remove(self, conn: Any) -> bool:
        """Remove the first equal connection; False if none was there."""
        try:
            self._conns.remove(conn)
        except ValueError:
            return False
        return True


@dataclass
class ClientTask:
    """A request together with the function that receives its response."""

    req: Any = None
    cb: Optional[ResponseCallback] = None
    start_time: int = 0


class ClientContext:
    """State of one in-flight request: its task, response and timeout timer."""

    def __init__(
        self,
        task: Optional[ClientTask] = None,
        cancel_timer: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.task = task
        self.resp: Any = None
        self.parser: Any = None
        self.timer_id = INVALID_TIMER_ID
        self._kill_timer = cancel_timer

    def cancel_timer(self) -> None:
        """Kill the pending timer, if any."""
        if self.timer_id != INVALID_TIMER_ID:
            if self._kill_timer is not None:
                self._kill_timer(self.timer_id)
            self.timer_id = INVALID_TIMER_ID

    def cancel_task(self) -> None:
        """Drop the task without calling its callback."""
        self.cancel_timer()
        self.task = None

    def callback(self) -> None:
        """Hand the response to the task's callback; the task is then done."""
        self.cancel_timer()
        if self.task is not None and self.task.cb is not None:
            self.task.cb(self.resp)
        self.task = None

    def success_callback(self) -> None:
        self.callback()
        self.resp = None

    def error_callback(self) -> None:
        self.resp = None
        self.callback()