"""Justfile settings and the shell they select."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from justlib.string_kind import StringLiteral


@dataclass(frozen=True)
class DotenvLoad:
    value: bool = True


@dataclass(frozen=True)
class Export:
    value: bool = True


@dataclass(frozen=True)
class PositionalArguments:
    value: bool = True


@dataclass
class Shell:
    """A shell command and the arguments passed before each script."""

    command: StringLiteral
    arguments: list[StringLiteral] = field(default_factory=list)


Setting = Union[DotenvLoad, Export, PositionalArguments, Shell]


@dataclass
class Set:
    """A `set NAME := VALUE` item."""

    name: str
    value: Setting

    @property
    def key(self) -> str:
        return self.name


@dataclass
class ShellConfig:
    """The shell chosen on the command line."""

    shell: str = "sh"
    shell_args: list[str] = field(default_factory=lambda: ["-cu"])
    shell_present: bool = False


@dataclass
class Settings:
    """The combined settings of a justfile."""

    dotenv_load: bool | None = None
    export: bool = False
    positional_arguments: bool = False
    shell: Shell | None = None

    def apply(self, setting: Setting) -> None:
        """Record one setting."""
        match setting:
            case DotenvLoad(value=value):
                self.dotenv_load = value
            case Export(value=value):
                self.export = value
            case PositionalArguments(value=value):
                self.positional_arguments = value
            case Shell():
                self.shell = setting
            case _:
                raise TypeError(f"unknown setting: {setting!r}")

    def _justfile_shell(self, config: ShellConfig) -> Shell | None:
        return None if config.shell_present else self.shell

    def shell_binary(self, config: ShellConfig) -> str:
        """The shell to run, preferring one given on the command line."""
        shell = self._justfile_shell(config)
        return shell.command.cooked if shell is not None else config.shell

    def shell_arguments(self, config: ShellConfig) -> list[str]:
        shell = self._justfile_shell(config)
        if shell is not None:
            return [argument.cooked for argument in shell.arguments]
        return list(config.shell_args)

    def shell_command(self, config: ShellConfig) -> list[str]:
        """The argument vector that starts the shell."""
        return [self.shell_binary(config), *self.shell_arguments(config)]