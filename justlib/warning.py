"""Warnings printed while loading a justfile."""

from __future__ import annotations

from enum import Enum

from justlib.token import Token

_DOTENV_LOAD_MESSAGE = (
    "A `.env` file was found and loaded, but this behavior will change in the future.\n"
    "To silence this warning and continue loading `.env` files, add:\n"
    "\n"
    "    set dotenv-load := true\n"
    "\n"
    "To silence this warning and stop loading `.env` files, add:\n"
    "\n"
    "    set dotenv-load := false\n"
    "\n"
    "See issue 469 in the project's issue tracker for more details."
)


class Warning(Enum):  # noqa: A001
    """A warning; its value is the message text."""

    DOTENV_LOAD = _DOTENV_LOAD_MESSAGE

    def context(self) -> Token | None:
        """The token the warning points at, if any."""
        return None

    def render(
        self,
        warning_prefix: str = "",
        warning_suffix: str = "",
        message_prefix: str = "",
        message_suffix: str = "",
    ) -> str:
        """Format the warning, wrapping its parts in the given colour codes."""
        text = (
            f"{warning_prefix}warning:{warning_suffix} "
            f"{message_prefix}{self.value}{message_suffix}"
        )
        token = self.context()
        if token is not None:
            text += "\n" + token.write_context(warning_prefix, warning_suffix)
        return text

    def __str__(self) -> str:
        return self.render()