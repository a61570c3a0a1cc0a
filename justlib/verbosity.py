"""Output verbosity and colour preferences."""

from __future__ import annotations

from enum import Enum


class Verbosity(Enum):
    """How much to report, from silent to very chatty."""

    QUIET = "quiet"
    TACITURN = "taciturn"
    LOQUACIOUS = "loquacious"
    GRANDILOQUENT = "grandiloquent"

    @classmethod
    def from_flag_occurrences(cls, flag_occurrences: int) -> Verbosity:
        """Map the number of verbose flags given to a verbosity."""
        if flag_occurrences == 0:
            return cls.TACITURN
        if flag_occurrences == 1:
            return cls.LOQUACIOUS
        return cls.GRANDILOQUENT

    def quiet(self) -> bool:
        return self is Verbosity.QUIET

    def loud(self) -> bool:
        return not self.quiet()

    def loquacious(self) -> bool:
        return self in (Verbosity.LOQUACIOUS, Verbosity.GRANDILOQUENT)

    def grandiloquent(self) -> bool:
        return self is Verbosity.GRANDILOQUENT


class UseColor(Enum):
    """When to colour output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"