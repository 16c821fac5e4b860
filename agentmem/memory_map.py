"""Typed in-memory key/value map with deterministic, sorted iteration."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from .errors import CapacityOverflowError, NotFoundError
from .limits import MAX_ENTRY_COUNT
from .validation import validate_key, validate_value

__all__ = ["Entry", "MapStats", "MemoryMap"]


class Entry(NamedTuple):
    """A key together with its value."""

    key: str
    value: str


@dataclass(frozen=True)
class MapStats:
    """Lightweight runtime statistics for a :class:`MemoryMap`."""

    entry_count: int
    is_empty: bool


class MemoryMap:
    """Map of validated keys to validated values, iterated in key order.

    Iterating a map yields :class:`Entry` pairs sorted by key.
    """

    def __init__(self, entries: Iterable[tuple[str, str]] | None = None) -> None:
        self._entries: dict[str, str] = {}
        for key, value in entries or ():
            self._entries[validate_key(key)] = validate_value(value)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Entry]:
        return (Entry(key, value) for key, value in sorted(self._entries.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemoryMap):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"MemoryMap({self.entries()!r})"

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def insert(self, key: str, value: str) -> str | None:
        """Insert or replace a value, returning the previous one if any."""
        validate_key(key)
        validate_value(value)
        if len(self._entries) >= MAX_ENTRY_COUNT:
            raise CapacityOverflowError("inserting beyond MAX_ENTRY_COUNT")
        previous = self._entries.get(key)
        self._entries[key] = value
        return previous

    def get(self, key: str) -> str | None:
        """Return the value for ``key``, or None."""
        return self._entries.get(key)

    def require(self, key: str) -> str:
        """Return the value for ``key`` or raise :class:`NotFoundError`."""
        try:
            return self._entries[key]
        except KeyError:
            raise NotFoundError("key", key) from None

    def remove(self, key: str) -> str | None:
        """Remove ``key`` and return its value, or None if absent."""
        return self._entries.pop(key, None)

    def remove_required(self, key: str) -> str:
        """Remove ``key`` and return its value, or raise :class:`NotFoundError`."""
        try:
            return self._entries.pop(key)
        except KeyError:
            raise NotFoundError("key", key) from None

    def entries(self) -> list[Entry]:
        """All entries sorted by key."""
        return list(self)

    def keys(self) -> list[str]:
        """All keys in sorted order."""
        return sorted(self._entries)

    def values(self) -> list[str]:
        """All values in sorted key order."""
        return [entry.value for entry in self]

    def extend(self, entries: Iterable[tuple[str, str]]) -> None:
        """Insert every ``(key, value)`` pair, enforcing the entry limit."""
        for key, value in entries:
            self.insert(key, value)

    def first(self) -> Entry | None:
        """The entry with the smallest key, or None if empty."""
        if not self._entries:
            return None
        key = min(self._entries)
        return Entry(key, self._entries[key])

    def last(self) -> Entry | None:
        """The entry with the largest key, or None if empty."""
        if not self._entries:
            return None
        key = max(self._entries)
        return Entry(key, self._entries[key])

    def stats(self) -> MapStats:
        """Current entry count and emptiness."""
        return MapStats(entry_count=len(self._entries), is_empty=not self._entries)