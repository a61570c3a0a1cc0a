"""Parsing of `#!` interpreter lines."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SEPARATOR = re.compile(r"[ \t]")
_PATH_SEPARATOR = re.compile(r"[/\\]")


@dataclass(frozen=True)
class Shebang:
    """An interpreter and its optional single argument."""

    interpreter: str
    argument: str | None = None

    @classmethod
    def parse(cls, line: str) -> Shebang | None:
        """Parse a shebang line, or return None if the line is not one."""
        if not line.startswith("#!"):
            return None

        first_line = line[2:].split("\n", 1)[0]
        if first_line.endswith("\r"):
            first_line = first_line[:-1]

        pieces = _SEPARATOR.split(first_line.strip(), maxsplit=1)
        interpreter = pieces[0]
        argument = pieces[1] if len(pieces) > 1 else None

        if not interpreter:
            return None

        return cls(interpreter, argument)

    def interpreter_filename(self) -> str:
        """Return the final path component of the interpreter."""
        return _PATH_SEPARATOR.split(self.interpreter)[-1]

    def script_filename(self, recipe: str) -> str:
        """Return the file name to use for a script of the given recipe."""
        filename = self.interpreter_filename()
        if filename in ("cmd", "cmd.exe"):
            return f"{recipe}.bat"
        if filename in ("powershell", "powershell.exe"):
            return f"{recipe}.ps1"
        return recipe

    def include_shebang_line(self) -> bool:
        """Return whether the shebang line belongs in the written script."""
        return self.interpreter_filename() not in ("cmd", "cmd.exe")