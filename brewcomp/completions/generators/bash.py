"""Bash completion script generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...logging_setup import get_logger
from ..models import BASH_NAMED_ARGS_COMPLETION_FUNCTION_MAPPING
from ..options import check_function_names, command_gets_completions, command_options, function_name, partition_named_args
from ..templates import load_template

if TYPE_CHECKING:
    from pathlib import Path

    from ...commands.models import MetadataAccessor

__all__ = ["generate_bash", "generate_bash_subcommand_completion"]


def generate_bash_subcommand_completion(command: str, metadata: MetadataAccessor) -> str | None:
    """Generate the bash completion function of one command.

    Args:
        command: The command name
        metadata: The command metadata

    Returns:
        The function source, or None if the command gets no completions
    """
    if not command_gets_completions(command, metadata):
        return None

    named_completion_string = ""
    if (types := metadata.named_args_type(command)) is not None:
        named_args_strings, named_args_types = partition_named_args(types)

        for arg_type in named_args_types:
            helper = BASH_NAMED_ARGS_COMPLETION_FUNCTION_MAPPING.get(arg_type)  # type: ignore[call-overload]
            if helper is None:
                get_logger("completions").debug("%s: no bash completion for %s", command, arg_type)
                continue
            named_completion_string += f"\n  {helper}"

        if named_args_strings:
            named_completion_string += f'\n  __brewcomp "{" ".join(named_args_strings)}"'

    flags = "\n      ".join(sorted(command_options(command, metadata)))
    return f"""{function_name(command)}() {{
  local cur="${{COMP_WORDS[COMP_CWORD]}}"
  case "$cur" in
    -*)
      __brewcomp "
      {flags}
      "
      return
      ;;
  esac{named_completion_string}
}}
"""


def generate_bash(commands: list[str], metadata: MetadataAccessor, template_dir: Path | None = None) -> str:
    """Generate the bash completion script.

    Args:
        commands: Sorted command names, aliases included
        metadata: The command metadata
        template_dir: Directory holding `bash.tmpl`, the packaged templates by default

    Returns:
        The bash completion script content

    Raises:
        ConfigurationError: If the template is missing or corrupt, or two commands share a function name
    """
    template = load_template("bash", template_dir)
    eligible = [command for command in commands if command_gets_completions(command, metadata)]
    check_function_names(eligible)

    completion_functions = [
        function for command in commands if (function := generate_bash_subcommand_completion(command, metadata)) is not None
    ]
    function_mappings = [f"{command}) {function_name(command)} ;;" for command in eligible]

    return template.render(
        completion_functions=completion_functions,
        function_mappings=function_mappings,
    )
