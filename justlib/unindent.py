"""Remove the common leading indentation from a block of text."""

from __future__ import annotations

from itertools import takewhile

_INDENT_CHARS = " \t"
_BLANK_CHARS = frozenset(" \t\r\n")


def _split_lines(text: str) -> list[str]:
    """Split text into lines, keeping each line's trailing newline."""
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    if not lines[-1]:
        lines.pop()
    return lines


def indentation(line: str) -> str:
    """Return the leading run of spaces and tabs of a line."""
    return line[: len(line) - len(line.lstrip(_INDENT_CHARS))]


def blank(line: str) -> bool:
    """Return True if a line holds only whitespace and line endings."""
    return all(c in _BLANK_CHARS for c in line)


def common(a: str, b: str) -> str:
    """Return the longest common prefix of two strings."""
    length = sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(a, b)))
    return a[:length]


def unindent(text: str) -> str:
    """Strip the indentation shared by all non-blank lines.

    Blank first and last lines are dropped; other blank lines become
    a bare newline.
    """
    lines = _split_lines(text)

    shared: str | None = None
    for line in lines:
        if blank(line):
            continue
        line_indentation = indentation(line)
        shared = line_indentation if shared is None else common(shared, line_indentation)
    prefix_length = len(shared or "")

    last = len(lines) - 1
    pieces = []
    for i, line in enumerate(lines):
        if blank(line):
            pieces.append("\n" if 0 < i < last else "")
        else:
            pieces.append(line[prefix_length:])
    return "".join(pieces)