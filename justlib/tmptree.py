"""Temporary directory trees built from nested mappings."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Union

Entry = Union[str, Mapping[str, "Entry"]]

_PREFIX = "just-test-tempdir"


def tempdir() -> tempfile.TemporaryDirectory[str]:
    """Create a temporary directory that is removed on cleanup."""
    return tempfile.TemporaryDirectory(prefix=_PREFIX)


def instantiate(path: str | os.PathLike[str], entry: Entry) -> None:
    """Write a string as a file, or a mapping as a directory of entries."""
    path = Path(path)
    if isinstance(entry, str):
        path.write_text(entry)
        return
    path.mkdir()
    for name, child in entry.items():
        instantiate(path / name, child)


def tmptree(entries: Mapping[str, Entry]) -> tempfile.TemporaryDirectory[str]:
    """Create a temporary directory holding the given entries."""
    directory = tempdir()
    try:
        for name, entry in entries.items():
            instantiate(Path(directory.name) / name, entry)
    except BaseException:
        directory.cleanup()
        raise
    return directory