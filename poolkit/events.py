"""Callback holders for one-shot events and repeating timers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .connpool import INVALID_TIMER_ID

INFINITE = 0xFFFFFFFF

__all__ = ["Event", "Timer", "INFINITE", "INVALID_TIMER_ID"]


@dataclass
class Event:
    """An event record and the function to call when it fires."""

    cb: Optional[Callable[["Event"], Any]] = None
    event: Any = None

    def fire(self) -> bool:
        """Call the callback with this event; False if there is none."""
        if self.cb is None:
            return False
        self.cb(self)
        return True


@dataclass
class Timer:
    """A timer handle, its callback and how many more times it repeats."""

    timer: Any = None
    cb: Optional[Callable[[int], Any]] = None
    repeat: int = INFINITE

    def __post_init__(self) -> None:
        if not 0 <= self.repeat <= INFINITE:
            raise ValueError("repeat must fit in 32 unsigned bits")

    def fire(self, timer_id: int) -> bool:
        """Call the callback with ``timer_id``; False if there is none."""
        if self.cb is None:
            return False
        self.cb(timer_id)
        return True

    def is_infinite(self) -> bool:
        """True if the timer repeats without end."""
        return self.repeat == INFINITE