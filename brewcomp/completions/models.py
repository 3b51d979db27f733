"""Constants for completion generation.

The named argument tables map each semantic kind to the shell-side helper
that completes it. Both tables cover every ArgKind; generated scripts rely
on the helpers defined in the packaged templates.
"""

from __future__ import annotations

from types import MappingProxyType

from ..commands.models import ArgKind

__all__ = [
    "BASH_NAMED_ARGS_COMPLETION_FUNCTION_MAPPING",
    "DEFAULT_PATHS",
    "SCRIPT_PATHS",
    "ZSH_NAMED_ARGS_COMPLETION_FUNCTION_MAPPING",
]

BASH_NAMED_ARGS_COMPLETION_FUNCTION_MAPPING: MappingProxyType[ArgKind, str] = MappingProxyType(
    {
        ArgKind.FORMULA: "__brew_complete_formulae",
        ArgKind.INSTALLED_FORMULA: "__brew_complete_installed_formulae",
        ArgKind.OUTDATED_FORMULA: "__brew_complete_outdated_formulae",
        ArgKind.CASK: "__brew_complete_casks",
        ArgKind.INSTALLED_CASK: "__brew_complete_installed_casks",
        ArgKind.OUTDATED_CASK: "__brew_complete_outdated_casks",
        ArgKind.TAP: "__brew_complete_tapped",
        ArgKind.INSTALLED_TAP: "__brew_complete_tapped",
        ArgKind.COMMAND: "__brew_complete_commands",
        ArgKind.DIAGNOSTIC_CHECK: '__brewcomp "$(brew doctor --list-checks)"',
        ArgKind.FILE: "__brew_complete_files",
    }
)

ZSH_NAMED_ARGS_COMPLETION_FUNCTION_MAPPING: MappingProxyType[ArgKind, str] = MappingProxyType(
    {
        ArgKind.FORMULA: "__brew_formulae",
        ArgKind.INSTALLED_FORMULA: "__brew_installed_formulae",
        ArgKind.OUTDATED_FORMULA: "__brew_outdated_formulae",
        ArgKind.CASK: "__brew_casks",
        ArgKind.INSTALLED_CASK: "__brew_installed_casks",
        ArgKind.OUTDATED_CASK: "__brew_outdated_casks",
        ArgKind.TAP: "__brew_any_tap",
        ArgKind.INSTALLED_TAP: "__brew_installed_taps",
        ArgKind.COMMAND: "__brew_commands",
        ArgKind.DIAGNOSTIC_CHECK: "__brew_diagnostic_checks",
        ArgKind.FILE: "__brew_formulae_or_ruby_files",
    }
)

# Where `update_shell_completions` writes each script, relative to the completions directory
SCRIPT_PATHS = MappingProxyType(
    {
        "bash": "bash/brew",
        "zsh": "zsh/_brew",
    }
)

# Default user-level completion paths
DEFAULT_PATHS = MappingProxyType(
    {
        "bash": "~/.local/share/bash-completion/completions/brew",
        "zsh": "~/.zsh/completions/_brew",
    }
)
