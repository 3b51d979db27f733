"""Data models for command metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

__all__ = [
    "ArgKind",
    "CommandInfo",
    "LiteralAlternative",
    "MetadataAccessor",
    "NamedArgType",
    "RawOption",
    "UnknownKind",
]


class ArgKind(StrEnum):
    """Semantic kinds of named arguments, each backed by a shell-side helper."""

    FORMULA = "formula"
    INSTALLED_FORMULA = "installed_formula"
    OUTDATED_FORMULA = "outdated_formula"
    CASK = "cask"
    INSTALLED_CASK = "installed_cask"
    OUTDATED_CASK = "outdated_cask"
    TAP = "tap"
    INSTALLED_TAP = "installed_tap"
    COMMAND = "command"
    DIAGNOSTIC_CHECK = "diagnostic_check"
    FILE = "file"


@dataclass(frozen=True)
class LiteralAlternative:
    """A concrete completion value (e.g. "list" for `brew services list`)."""

    value: str


@dataclass(frozen=True)
class UnknownKind:
    """A semantic kind tag this version does not know about."""

    name: str


NamedArgType = LiteralAlternative | ArgKind | UnknownKind

# (flag name, description) as declared by the command; either part may be missing
RawOption = tuple[str, ...]


@dataclass
class CommandInfo:
    """Everything known about a single command."""

    name: str
    options: list[RawOption] = field(default_factory=list)
    named_args: list[NamedArgType] | None = None  # None: no type information
    description: str = ""


class MetadataAccessor(Protocol):
    """Read-only view over the program's commands."""

    def commands(self, aliases: bool = False) -> list[str]:
        """Return the command names, alias names included when `aliases` is set."""
        ...

    def command_options(self, command: str) -> list[RawOption] | None:
        """Return the raw (flag, description) options of `command`."""
        ...

    def named_args_type(self, command: str) -> list[NamedArgType] | None:
        """Return the ordered named argument types of `command`."""
        ...

    def command_description(self, command: str, short: bool = False) -> str | None:
        """Return the description of `command`, first sentence only when `short`."""
        ...

    def aliases(self) -> dict[str, str]:
        """Return the alias table (alias -> target command)."""
        ...
