"""String conversion helpers, case-insensitive and multi-valued maps, form data."""

from __future__ import annotations

import re
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def case_less(lhs: str, rhs: str) -> bool:
    """True if ``lhs`` sorts before ``rhs`` when case is ignored."""
    return lhs.lower() < rhs.lower()


class CaseInsensitiveDict(MutableMapping):
    """Mapping whose keys compare without regard to case.

    A key keeps the spelling it was first stored with; iteration runs in
    case-insensitive sorted order.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._data: Dict[str, Tuple[str, Any]] = {}
        self.update(*args, **kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._data[key.lower()][1]

    def __setitem__(self, key: str, value: Any) -> None:
        folded = key.lower()
        existing = self._data.get(folded)
        self._data[folded] = (existing[0] if existing else key, value)

    def __delitem__(self, key: str) -> None:
        folded = key.lower()
        if folded not in self._data:
            raise KeyError(key)
        self._data.pop(folded)

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._data):
            yield self._data[folded][0]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


def to_string(value: Any) -> str:
    """Text form of a value as a stream would write it."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def from_string(text: str, kind: type) -> Any:
    """Read a value of ``kind`` (int, float, bool or str) from the start of ``text``.

    Leading whitespace is skipped; a number that cannot be read gives zero.
    """
    if kind is str:
        parts = text.split()
        return parts[0] if parts else ""
    if kind is bool:
        match = _INT.match(text)
        return bool(match) and int(match.group(1)) == 1
    if kind is int:
        match = _INT.match(text)
        return int(match.group(1)) if match else 0
    if kind is float:
        match = _FLOAT.match(text)
        return float(match.group(1)) if match else 0.0
    raise TypeError(f"cannot read a value of type {kind!r}")


class MultiMap:
    """Map that keeps every value added under a key, keys in sorted order."""

    def __init__(self) -> None:
        self._data: Dict[Any, List[Any]] = {}

    def add(self, key: Any, value: Any) -> None:
        self._data.setdefault(key, []).append(value)

    def get_all(self, key: Any) -> List[Any]:
        """Every value under ``key``, in the order they were added."""
        return list(self._data.get(key, ()))

    def count(self, key: Any) -> int:
        return len(self._data.get(key, ()))

    def items(self) -> List[Tuple[Any, Any]]:
        """All pairs, sorted by key; equal keys keep insertion order."""
        return [(key, value) for key in sorted(self._data) for value in self._data[key]]

    def __len__(self) -> int:
        return sum(len(values) for values in self._data.values())


@dataclass
class FormData:
    """One part of a multipart form: content and, for files, a file name."""

    filename: str = ""
    content: str = ""

    @classmethod
    def from_value(cls, value: Any) -> "FormData":
        """A part whose content is the text form of ``value``."""
        return cls(content=to_string(value))


@dataclass
class FormFile(FormData):
    """A form part naming a file to upload."""