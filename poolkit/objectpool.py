"""A bounded pool of reusable objects with blocking borrow."""

from __future__ import annotations

import threading
from collections import deque
from contextlib import contextmanager
from typing import Any, Callable, Deque, Iterator, Optional

DEFAULT_OBJECT_POOL_INIT_NUM = 0
DEFAULT_OBJECT_POOL_MAX_NUM = 4
DEFAULT_OBJECT_POOL_TIMEOUT = 3.0


class ObjectPool:
    """Lends objects made by ``factory``; at most ``max_num`` exist at once.

    ``timeout`` is in seconds; when the pool is exhausted, ``borrow`` waits
    that long for an object to come back (not at all if it is 0).
    """

    def __init__(
        self,
        factory: Callable[[], Any],
        init_num: int = DEFAULT_OBJECT_POOL_INIT_NUM,
        max_num: int = DEFAULT_OBJECT_POOL_MAX_NUM,
        timeout: float = DEFAULT_OBJECT_POOL_TIMEOUT,
    ) -> None:
        self._factory = factory
        self.max_num = max_num
        self.timeout = timeout
        self._lock = threading.Lock()
        self._cond = threading.Condition(self._lock)
        self._objects: Deque[Any] = deque()
        for _ in range(init_num):
            obj = factory()
            if obj is not None:
                self._objects.append(obj)
        self._object_num = len(self._objects)

    def object_num(self) -> int:
        """Objects that exist, idle or lent out."""
        return self._object_num

    def idle_num(self) -> int:
        """Objects waiting in the pool."""
        return len(self._objects)

    def borrow_num(self) -> int:
        """Objects currently lent out."""
        return self.object_num() - self.idle_num()

    def try_borrow(self) -> Optional[Any]:
        """Take an idle object, or None if there is none."""
        with self._lock:
            return self._objects.popleft() if self._objects else None

    def borrow(self) -> Optional[Any]:
        """Take an object, creating or waiting for one; None if none came."""
        obj = self.try_borrow()
        if obj is not None:
            return obj
        with self._cond:
            if self._object_num < self.max_num:
                self._object_num += 1
                self._lock.release()
                try:
                    obj = self._factory()
                except BaseException:
                    self._lock.acquire()
                    self._object_num -= 1
                    raise
                self._lock.acquire()
                if obj is None:
                    self._object_num -= 1
                return obj
            if self.timeout > 0:
                if not self._cond.wait(self.timeout):
                    return None
                if self._objects:
                    return self._objects.popleft()
            return None

    def give_back(self, obj: Any) -> None:
        """Return a borrowed object to the pool."""
        if obj is None:
            return
        with self._cond:
            self._objects.append(obj)
            self._cond.notify()

    def add(self, obj: Any) -> bool:
        """Put a new object into the pool; False if the pool is full."""
        with self._cond:
            if self._object_num >= self.max_num:
                return False
            self._objects.append(obj)
            self._object_num += 1
            self._cond.notify()
            return True

    def remove(self, obj: Any) -> bool:
        """Remove an idle object from the pool; False if it is not there."""
        with self._lock:
            for i, item in enumerate(self._objects):
                if item is obj:
                    del self._objects[i]
                    self._object_num -= 1
                    return True
            return False

    def clear(self) -> None:
        """Forget every object."""
        with self._lock:
            self._objects.clear()
            self._object_num = 0

    @contextmanager
    def borrowed(self) -> Iterator[Optional[Any]]:
        """Borrow an object for the block and give it back afterwards."""
        obj = self.borrow()
        try:
            yield obj
        finally:
            if obj is not None:
                self.give_back(obj)