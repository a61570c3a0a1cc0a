"""A map of values keyed by a name each value carries."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from operator import attrgetter
from typing import Generic, TypeVar

V = TypeVar("V")

_default_key: Callable[[object], str] = attrgetter("key")


class Table(Generic[V]):
    """Values stored under their own keys, iterated in key order."""

    def __init__(
        self,
        values: Iterable[V] = (),
        key: Callable[[V], str] | None = None,
    ) -> None:
        self._key = key or _default_key
        self._map: dict[str, V] = {}
        for value in values:
            self.insert(value)

    def insert(self, value: V) -> None:
        """Store a value under its key, replacing any value already there."""
        self._map[self._key(value)] = value

    def get(self, key: str) -> V | None:
        return self._map.get(key)

    def keys(self) -> Iterator[str]:
        return iter(sorted(self._map))

    def values(self) -> Iterator[V]:
        return (self._map[key] for key in self.keys())

    def items(self) -> Iterator[tuple[str, V]]:
        return ((key, self._map[key]) for key in self.keys())

    def pop(self) -> V | None:
        """Remove and return the value with the smallest key, if any."""
        if not self._map:
            return None
        return self._map.pop(min(self._map))

    def remove(self, key: str) -> V | None:
        return self._map.pop(key, None)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __getitem__(self, key: str) -> V:
        try:
            return self._map[key]
        except KeyError:
            raise KeyError(f"no entry found for key: {key}") from None

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._map == other._map

    def __repr__(self) -> str:
        return f"Table({list(self.values())!r})"