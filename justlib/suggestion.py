"""Suggestions offered when a name is not found."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Suggestion:
    """A close match for a mistyped name, possibly an alias."""

    name: str
    target: str | None = None

    def __str__(self) -> str:
        alias = f", an alias for `{self.target}`" if self.target is not None else ""
        return f"Did you mean `{self.name}`{alias}?"