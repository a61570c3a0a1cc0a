"""How the justfile is located."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Union


def _as_path(value: str | os.PathLike[str]) -> PurePath:
    return value if isinstance(value, PurePath) else Path(value)


@dataclass(frozen=True)
class FromInvocationDirectory:
    """Search upwards from the invocation directory to the root.

    The working directory becomes the directory holding the justfile.
    """


@dataclass(frozen=True)
class FromSearchDirectory:
    """Search upwards as above, but start from `search_directory`."""

    search_directory: PurePath

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_directory", _as_path(self.search_directory))


@dataclass(frozen=True)
class WithJustfile:
    """Use the given justfile, working in the directory that contains it."""

    justfile: PurePath

    def __post_init__(self) -> None:
        object.__setattr__(self, "justfile", _as_path(self.justfile))


@dataclass(frozen=True)
class WithJustfileAndWorkingDirectory:
    """Use the given justfile and the given working directory."""

    justfile: PurePath
    working_directory: PurePath

    def __post_init__(self) -> None:
        object.__setattr__(self, "justfile", _as_path(self.justfile))
        object.__setattr__(
            self, "working_directory", _as_path(self.working_directory)
        )


SearchConfig = Union[
    FromInvocationDirectory,
    FromSearchDirectory,
    WithJustfile,
    WithJustfileAndWorkingDirectory,
]