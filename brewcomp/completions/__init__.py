"""Shell completion generators for brew.

This package provides:
- options: Option normalization, eligibility and description formatting
- generators: bash and zsh completion script generators
- templates: The completion script templates and their renderer
- handlers: Script writing for the `generate` and `compgen` commands
- linking: Opt-in linking of the completion files shipped by taps
"""

from __future__ import annotations

from .generators import GENERATORS, generate_bash, generate_zsh
from .handlers import get_default_path, handle_compgen, render_all, update_shell_completions
from .options import command_gets_completions, command_options, format_description, method_name

__all__ = [
    "GENERATORS",
    "command_gets_completions",
    "command_options",
    "format_description",
    "generate_bash",
    "generate_zsh",
    "get_default_path",
    "handle_compgen",
    "method_name",
    "render_all",
    "update_shell_completions",
]
