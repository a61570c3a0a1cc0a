"""Kinds of string and backtick literals, and the literals themselves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from justlib.token_kind import TokenKind


class StringDelimiter(Enum):
    BACKTICK = "`"
    QUOTE_DOUBLE = '"'
    QUOTE_SINGLE = "'"


class UnterminatedKind(Enum):
    """The error reported when a literal is not closed."""

    UNTERMINATED_STRING = "Unterminated string"
    UNTERMINATED_BACKTICK = "Unterminated backtick"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StringKind:
    """A delimiter together with whether the literal is indented (tripled)."""

    kind: StringDelimiter
    indented: bool

    @classmethod
    def all(cls) -> tuple[StringKind, ...]:
        """Every kind, indented ones before their plain counterparts."""
        return tuple(
            cls(delimiter, indented)
            for delimiter in StringDelimiter
            for indented in (True, False)
        )

    def delimiter(self) -> str:
        return self.kind.value * (3 if self.indented else 1)

    def delimiter_len(self) -> int:
        return len(self.delimiter())

    def token_kind(self) -> TokenKind:
        if self.kind is StringDelimiter.BACKTICK:
            return TokenKind.BACKTICK
        return TokenKind.STRING_TOKEN

    def unterminated_error_kind(self) -> UnterminatedKind:
        if self.kind is StringDelimiter.BACKTICK:
            return UnterminatedKind.UNTERMINATED_BACKTICK
        return UnterminatedKind.UNTERMINATED_STRING

    def processes_escape_sequences(self) -> bool:
        return self.kind is StringDelimiter.QUOTE_DOUBLE

    @classmethod
    def from_token_start(cls, token_start: str) -> StringKind | None:
        """Return the kind whose delimiter opens the given text, if any."""
        return next(
            (kind for kind in cls.all() if token_start.startswith(kind.delimiter())),
            None,
        )


@dataclass(frozen=True)
class StringLiteral:
    """A string literal with its raw source text and processed value."""

    kind: StringKind
    raw: str
    cooked: str

    def __str__(self) -> str:
        delimiter = self.kind.delimiter()
        return f"{delimiter}{self.raw}{delimiter}"