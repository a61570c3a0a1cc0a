"""Lexical tokens and the source context shown in error messages."""

from __future__ import annotations

from dataclasses import dataclass

from wcwidth import wcwidth

from justlib.token_kind import TokenKind

_TAB_WIDTH = 4


def _source_lines(text: str) -> list[str]:
    """Split text into lines the way a line iterator does.

    A trailing newline does not start an empty final line, and a carriage
    return before a newline is dropped.
    """
    pieces = text.split("\n")
    last = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if last:
        lines.append(last)
    return lines


def _char_width(c: str) -> int:
    return max(wcwidth(c), 0)


@dataclass(frozen=True)
class Token:
    """A span of source text with its position and kind."""

    offset: int
    length: int
    line: int
    column: int
    src: str
    kind: TokenKind

    def lexeme(self) -> str:
        """Return the text the token covers."""
        return self.src[self.offset : self.offset + self.length]

    def write_context(self, prefix: str = "", suffix: str = "") -> str:
        """Render the token's line with carets under the token.

        `prefix` and `suffix` wrap the carets, for colouring.
        """
        width = self.length or 1
        line_number = self.line + 1
        lines = _source_lines(self.src)

        if self.line >= len(lines):
            if self.offset != len(self.src):
                return f"internal error: Error has invalid line number: {line_number}"
            return ""

        space_column = 0
        space_width = 0
        displayed = []
        for i, c in enumerate(self.line_text(lines)):
            if c == "\t":
                shown, char_width = " " * _TAB_WIDTH, _TAB_WIDTH
            else:
                shown, char_width = c, _char_width(c)
            if i < self.column:
                space_column += char_width
            elif i < self.column + width:
                space_width += char_width
            displayed.append(shown)

        gutter = " " * len(str(line_number))
        carets = "^" * max(space_width, 1)
        return (
            f"{gutter} |\n"
            f"{line_number} | {''.join(displayed)}\n"
            f"{gutter} | {' ' * space_column}{prefix}{carets}{suffix}"
        )

    def line_text(self, lines: list[str]) -> str:
        """Return the text of the token's line from the given lines."""
        return lines[self.line]