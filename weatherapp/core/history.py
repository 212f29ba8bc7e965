"""Bounded, most-recent-first record of searched city names.

Entries are matched case-sensitively. Recording a name that is already
present does nothing: the existing entry keeps its position.
"""
from __future__ import annotations

from threading import Lock
from typing import Iterator, List, Tuple


DEFAULT_CAPACITY = 10


class SearchHistory:
    """Deduplicated list of city names, newest first, at most ``capacity`` long."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._entries: List[str] = []
        self._lock = Lock()

    def record(self, city: str) -> None:
        with self._lock:
            if city in self._entries:
                return
            self._entries.insert(0, city)
            while len(self._entries) > self.capacity:
                self._entries.pop()

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def all(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, city: object) -> bool:
        with self._lock:
            return city in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.all())


__all__ = ["DEFAULT_CAPACITY", "SearchHistory"]
