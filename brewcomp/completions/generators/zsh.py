"""Zsh completion script generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...logging_setup import get_logger
from ..models import ZSH_NAMED_ARGS_COMPLETION_FUNCTION_MAPPING
from ..options import (
    check_function_names,
    command_gets_completions,
    command_options,
    format_description,
    function_name,
    partition_named_args,
)
from ..templates import load_template

if TYPE_CHECKING:
    from pathlib import Path

    from ...commands.models import MetadataAccessor

__all__ = ["generate_zsh", "generate_zsh_subcommand_completion"]


def _quote_if_flag(word: str) -> str:
    """Single-quote a word starting with `-` so that it is not read as an option."""
    return f"'{word}'" if word.startswith("-") else word


def generate_zsh_subcommand_completion(command: str, metadata: MetadataAccessor) -> str | None:
    """Generate the zsh completion function of one command.

    Each option becomes an `_arguments` spec (`--flag` or `--flag[description]`),
    then each named argument kind adds a positional spec calling its helper and
    literal alternatives add a final `(a b c)` spec.

    Args:
        command: The command name
        metadata: The command metadata

    Returns:
        The function source, or None if the command gets no completions
    """
    if not command_gets_completions(command, metadata):
        return None

    specs = [
        f"{opt}[{format_description(desc)}]" if desc.strip() else opt for opt, desc in sorted(command_options(command, metadata).items())
    ]

    if (types := metadata.named_args_type(command)) is not None:
        named_args_strings, named_args_types = partition_named_args(types)

        for arg_type in named_args_types:
            helper = ZSH_NAMED_ARGS_COMPLETION_FUNCTION_MAPPING.get(arg_type)  # type: ignore[call-overload]
            if helper is None:
                get_logger("completions").debug("%s: no zsh completion for %s", command, arg_type)
                continue
            specs.append(f"::{arg_type}:{helper}")

        if named_args_strings:
            specs.append(f"::subcommand:({' '.join(named_args_strings)})")

    args_line = " \\\n    ".join(f"'{spec}'" for spec in specs)
    return f"""# brew {command}
{function_name(command)}() {{
  _arguments \\
    {args_line}
}}
"""


def generate_zsh(commands: list[str], metadata: MetadataAccessor, template_dir: Path | None = None) -> str:
    """Generate the zsh completion script.

    Args:
        commands: Sorted command names, aliases included
        metadata: The command metadata
        template_dir: Directory holding `zsh.tmpl`, the packaged templates by default

    Returns:
        The zsh completion script content

    Raises:
        ConfigurationError: If the template is missing or corrupt, or two commands share a function name
    """
    template = load_template("zsh", template_dir)
    check_function_names(command for command in commands if command_gets_completions(command, metadata))
    alias_table = metadata.aliases()

    aliases = [f"{_quote_if_flag(alias)} {_quote_if_flag(target)}" for alias, target in alias_table.items()]

    builtin_command_descriptions: list[str] = []
    for command in commands:
        if command in alias_table:
            continue
        description = metadata.command_description(command, short=True)
        if not description or not description.strip():
            continue
        builtin_command_descriptions.append(f"'{command}:{format_description(description)}'")

    completion_functions = [
        function for command in commands if (function := generate_zsh_subcommand_completion(command, metadata)) is not None
    ]

    return template.render(
        aliases=aliases,
        builtin_command_descriptions=builtin_command_descriptions,
        completion_functions=completion_functions,
    )
