"""Kinds of lexical tokens."""

from enum import Enum


class TokenKind(Enum):
    """The kind of a token; its value is the human-readable description."""

    ASTERISK = "'*'"
    AT = "'@'"
    BACKTICK = "backtick"
    BANG_EQUALS = "'!='"
    BRACE_L = "'{'"
    BRACE_R = "'}'"
    BRACKET_L = "'['"
    BRACKET_R = "']'"
    COLON = "':'"
    COLON_EQUALS = "':='"
    COMMA = "','"
    COMMENT = "comment"
    DEDENT = "dedent"
    DOLLAR = "'$'"
    EOF = "end of file"
    EOL = "end of line"
    EQUALS = "'='"
    EQUALS_EQUALS = "'=='"
    IDENTIFIER = "identifier"
    INDENT = "indent"
    INTERPOLATION_END = "'}}'"
    INTERPOLATION_START = "'{{'"
    PAREN_L = "'('"
    PAREN_R = "')'"
    PLUS = "'+'"
    STRING_TOKEN = "string"
    TEXT = "command text"
    UNSPECIFIED = "unspecified"
    WHITESPACE = "whitespace"

    def __str__(self) -> str:
        return self.value