"""Errors raised while looking for a justfile."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path, PurePath


def _as_path(value: str | os.PathLike[str]) -> PurePath:
    return value if isinstance(value, PurePath) else Path(value)


def _and_ticked(items: Sequence[str]) -> str:
    ticked = [f"`{item}`" for item in items]
    if len(ticked) <= 2:
        return " and ".join(ticked)
    return ", ".join(ticked[:-1]) + ", and " + ticked[-1]


class SearchError(Exception):
    """Base class for justfile search failures."""


class MultipleCandidatesError(SearchError):
    """More than one file in a directory could be the justfile."""

    def __init__(self, candidates: Iterable[str | os.PathLike[str]]) -> None:
        self.candidates = [_as_path(candidate) for candidate in candidates]
        if not self.candidates:
            raise ValueError("at least one candidate is required")
        names = [candidate.name for candidate in self.candidates]
        super().__init__(
            f"Multiple candidate justfiles found in "
            f"`{self.candidates[0].parent}`: {_and_ticked(names)}"
        )


class SearchIoError(SearchError):
    """A directory could not be read."""

    def __init__(self, directory: str | os.PathLike[str], io_error: OSError) -> None:
        self.directory = _as_path(directory)
        self.io_error = io_error
        super().__init__(f"I/O error reading directory `{self.directory}`: {io_error}")


class NotFoundError(SearchError):
    """No justfile exists in the directory or any of its ancestors."""

    def __init__(self) -> None:
        super().__init__("No justfile found")


class JustfileHadNoParentError(SearchError):
    """The justfile path has no parent directory to work in."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = _as_path(path)
        super().__init__(f"Justfile path had no parent: {self.path}")