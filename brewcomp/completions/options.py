"""Per-command helpers shared by the bash and zsh generators.

Option normalization, eligibility, description sanitizing and function
name mangling.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..commands.models import LiteralAlternative
from ..constants import COMPLETIONS_EXCLUSION_LIST, DEPRECATED_COMMAND_PREFIX
from ..models import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..commands.models import ArgKind, MetadataAccessor, NamedArgType, UnknownKind

__all__ = [
    "check_function_names",
    "command_gets_completions",
    "command_options",
    "format_description",
    "function_name",
    "method_name",
    "partition_named_args",
]

TOGGLE_MARKER = "[no-]"

_ANGLE_TAG = re.compile(r"<[^<>]*>")
_ANGLE_CHARS = re.compile(r"[<>]")


def command_options(command: str, metadata: MetadataAccessor) -> dict[str, str]:
    """Return the canonical flag -> description mapping of a command.

    `--[no-]flag` toggles are split into `--flag` and `--no-flag`, both
    carrying the toggle's description. Source order is preserved.

    Args:
        command: The command name
        metadata: The command metadata

    Returns:
        Ordered mapping of flag names to descriptions
    """
    options: dict[str, str] = {}
    for option in metadata.command_options(command) or []:
        if not option or not option[0]:
            continue

        name = option[0]
        desc = option[1] if len(option) > 1 else ""
        if TOGGLE_MARKER in name:
            options[name.replace(TOGGLE_MARKER, "", 1)] = desc
            options[name.replace(TOGGLE_MARKER, "no-", 1)] = desc
        else:
            options[name] = desc
    return options


def command_gets_completions(command: str, metadata: MetadataAccessor) -> bool:
    """Tell whether a completion function should be generated for `command`."""
    if command.startswith(DEPRECATED_COMMAND_PREFIX) or command in COMPLETIONS_EXCLUSION_LIST:
        return False
    return bool(command_options(command, metadata))


def format_description(description: str) -> str:
    """Make a description safe to embed in a single-quoted completion spec.

    Doubles single quotes, removes <placeholders> and stray angle brackets,
    turns newlines into spaces and drops one trailing period.
    """
    text = description.replace("'", "''")
    text = _ANGLE_CHARS.sub("", _ANGLE_TAG.sub("", text))
    text = text.replace("\n", " ")
    return text.removesuffix(".")


def method_name(command: str) -> str:
    """Mangle a command name into a shell identifier fragment.

    Only `-` is replaced, the same way the zsh dispatcher expands `${command//-/_}`.
    E.g., "install" -> "install", "--cache" -> "__cache", "bump-formula-pr" -> "bump_formula_pr"
    """
    return command.replace("-", "_")


def function_name(command: str) -> str:
    """Return the completion function name of a command (e.g. `_brew_install`)."""
    return f"_brew_{method_name(command)}"


def partition_named_args(types: list[NamedArgType]) -> tuple[list[str], list[ArgKind | UnknownKind]]:
    """Split named argument types into literal values and semantic kinds.

    Relative order is preserved inside each group.
    """
    strings: list[str] = []
    kinds: list[ArgKind | UnknownKind] = []
    for arg_type in types:
        if isinstance(arg_type, LiteralAlternative):
            strings.append(arg_type.value)
        else:
            kinds.append(arg_type)
    return strings, kinds


def check_function_names(commands: Iterable[str]) -> None:
    """Make sure no two commands share a completion function.

    Raises:
        ConfigurationError: If two commands mangle to the same function name
    """
    seen: dict[str, str] = {}
    for command in commands:
        name = function_name(command)
        if (other := seen.setdefault(name, command)) != command:
            raise ConfigurationError(f"Commands {other!r} and {command!r} would both define {name}")
