"""Locating the justfile and the directory to run recipes in."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath

from justlib.search_config import (
    FromInvocationDirectory,
    FromSearchDirectory,
    SearchConfig,
    WithJustfile,
    WithJustfileAndWorkingDirectory,
)
from justlib.search_error import (
    JustfileHadNoParentError,
    MultipleCandidatesError,
    NotFoundError,
    SearchIoError,
)

FILENAME = "justfile"
PROJECT_ROOT_CHILDREN = (".bzr", ".git", ".hg", ".svn", "_darcs")


@dataclass(frozen=True)
class Search:
    """The justfile to use and the directory to run its recipes in."""

    justfile: PurePath
    working_directory: PurePath


def _as_path(value: str | os.PathLike[str]) -> PurePath:
    return value if isinstance(value, PurePath) else Path(value)


def _ancestors(directory: PurePath) -> list[PurePath]:
    return [directory, *directory.parents]


def _list_directory(directory: PurePath) -> list[str]:
    try:
        return os.listdir(directory)
    except OSError as error:
        raise SearchIoError(directory, error) from error


def _is_justfile_name(name: str) -> bool:
    return name.isascii() and name.lower() == FILENAME


def find_justfile(directory: str | os.PathLike[str]) -> PurePath:
    """Find the nearest justfile, matching its name case-insensitively."""
    for ancestor in _ancestors(_as_path(directory)):
        candidates = [
            ancestor / name
            for name in _list_directory(ancestor)
            if _is_justfile_name(name)
        ]
        if len(candidates) == 1:
            return candidates[0]
        if candidates:
            raise MultipleCandidatesError(candidates)
    raise NotFoundError()


def clean(
    invocation_directory: str | os.PathLike[str], path: str | os.PathLike[str]
) -> PurePath:
    """Join a path onto the invocation directory and drop `.` and `..` parts.

    A `..` removes the component before it, and is dropped when there is none.
    """
    joined = _as_path(invocation_directory) / path
    anchor = joined.anchor
    parts = joined.parts[1:] if anchor else joined.parts
    if anchor == "//":
        anchor = "/"

    cleaned: list[str] = []
    for part in parts:
        if part == "..":
            if cleaned:
                cleaned.pop()
        elif part != ".":
            cleaned.append(part)

    return type(joined)(anchor, *cleaned) if anchor else type(joined)(*cleaned)


def project_root(directory: str | os.PathLike[str]) -> PurePath:
    """Return the nearest ancestor holding a version-control marker.

    Falls back to the directory itself when there is none.
    """
    directory = _as_path(directory)
    for ancestor in _ancestors(directory):
        if any(name in PROJECT_ROOT_CHILDREN for name in _list_directory(ancestor)):
            return ancestor
    return directory


def working_directory_from_justfile(justfile: str | os.PathLike[str]) -> PurePath:
    """Return the directory that contains the justfile."""
    justfile = _as_path(justfile)
    parent = justfile.parent
    if parent == justfile:
        raise JustfileHadNoParentError(justfile)
    return parent


def find(
    search_config: SearchConfig, invocation_directory: str | os.PathLike[str]
) -> Search:
    """Locate an existing justfile as the configuration directs."""
    invocation_directory = _as_path(invocation_directory)
    match search_config:
        case FromInvocationDirectory():
            justfile = find_justfile(invocation_directory)
        case FromSearchDirectory(search_directory=search_directory):
            justfile = find_justfile(clean(invocation_directory, search_directory))
        case WithJustfile(justfile=given):
            justfile = clean(invocation_directory, given)
        case WithJustfileAndWorkingDirectory(
            justfile=given, working_directory=working_directory
        ):
            return Search(
                clean(invocation_directory, given),
                clean(invocation_directory, working_directory),
            )
        case _:
            raise TypeError(f"unknown search configuration: {search_config!r}")
    return Search(justfile, working_directory_from_justfile(justfile))


def init(
    search_config: SearchConfig, invocation_directory: str | os.PathLike[str]
) -> Search:
    """Choose where a new justfile should be created."""
    invocation_directory = _as_path(invocation_directory)
    match search_config:
        case FromInvocationDirectory():
            working_directory = project_root(invocation_directory)
            return Search(working_directory / FILENAME, working_directory)
        case FromSearchDirectory(search_directory=search_directory):
            working_directory = project_root(
                clean(invocation_directory, search_directory)
            )
            return Search(working_directory / FILENAME, working_directory)
        case WithJustfile(justfile=given):
            justfile = clean(invocation_directory, given)
            return Search(justfile, working_directory_from_justfile(justfile))
        case WithJustfileAndWorkingDirectory(
            justfile=given, working_directory=working_directory
        ):
            return Search(
                clean(invocation_directory, given),
                clean(invocation_directory, working_directory),
            )
        case _:
            raise TypeError(f"unknown search configuration: {search_config!r}")