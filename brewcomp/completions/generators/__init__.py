"""Shell completion generators.

Provides generator functions for each supported shell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .bash import generate_bash, generate_bash_subcommand_completion
from .zsh import generate_zsh, generate_zsh_subcommand_completion

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from ...commands.models import MetadataAccessor

__all__ = [
    "GENERATORS",
    "generate_bash",
    "generate_bash_subcommand_completion",
    "generate_zsh",
    "generate_zsh_subcommand_completion",
]

GENERATORS: dict[str, Callable[[list[str], MetadataAccessor, Path | None], str]] = {
    "bash": generate_bash,
    "zsh": generate_zsh,
}
