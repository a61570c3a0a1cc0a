"""Nested scopes of variable bindings."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from justlib.table import Table


@dataclass(frozen=True)
class Binding:
    """A named value, optionally exported to the environment."""

    export: bool
    name: str
    value: str

    @property
    def key(self) -> str:
        return self.name


class Scope:
    """Bindings of one level, falling back to a parent scope on lookup."""

    def __init__(self, parent: Scope | None = None) -> None:
        self.parent = parent
        self._bindings: Table[Binding] = Table()

    def child(self) -> Scope:
        """Return a new, empty scope whose parent is this one."""
        return Scope(self)

    def bind(self, export: bool, name: str, value: str) -> None:
        self._bindings.insert(Binding(export, name, value))

    def bound(self, name: str) -> bool:
        """Return whether this scope itself, not a parent, binds the name."""
        return name in self._bindings

    def value(self, name: str) -> str | None:
        """Look a name up here and then in each parent in turn."""
        binding = self._bindings.get(name)
        if binding is not None:
            return binding.value
        if self.parent is not None:
            return self.parent.value(name)
        return None

    def bindings(self) -> Iterator[Binding]:
        return self._bindings.values()

    def names(self) -> Iterator[str]:
        return self._bindings.keys()