"""Completion script writing: the `generate` and `compgen` commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..constants import SUPPORTED_SHELLS
from ..logging_setup import get_logger
from ..models import BrewcompError, ConfigurationError
from ..utils import atomic_write
from .generators import GENERATORS
from .models import DEFAULT_PATHS, SCRIPT_PATHS

if TYPE_CHECKING:
    from ..commands.models import MetadataAccessor

__all__ = [
    "CompgenRequest",
    "get_default_path",
    "handle_compgen",
    "parse_compgen_args",
    "render_all",
    "update_shell_completions",
]


def get_default_path(shell: str) -> str:
    """Get the default user-level completion path for a shell.

    Args:
        shell: Shell type ("bash" or "zsh")

    Returns:
        Expanded absolute path to the default completion file
    """
    return str(Path(DEFAULT_PATHS[shell]).expanduser())


def render_all(metadata: MetadataAccessor, template_dir: Path | None = None) -> dict[str, str]:
    """Render the script of every supported shell.

    Raises:
        ConfigurationError: If a template is missing or corrupt
    """
    commands = sorted(metadata.commands(aliases=True))
    return {shell: GENERATORS[shell](commands, metadata, template_dir) for shell in SUPPORTED_SHELLS}


def update_shell_completions(metadata: MetadataAccessor, completions_dir: Path, template_dir: Path | None = None) -> list[Path]:
    """Regenerate the bash and zsh scripts under `completions_dir`.

    Both scripts are rendered before anything is written.

    Args:
        metadata: The command metadata
        completions_dir: Destination directory (scripts go to `bash/brew` and `zsh/_brew`)
        template_dir: Directory holding the templates, the packaged ones by default

    Returns:
        The written paths

    Raises:
        ConfigurationError: If a template is missing or corrupt
    """
    log = get_logger("completions")
    scripts = render_all(metadata, template_dir)

    log.info("Writing completions to %s", completions_dir)
    written: list[Path] = []
    for shell, content in scripts.items():
        path = completions_dir / SCRIPT_PATHS[shell]
        atomic_write(path, content)
        log.debug("Wrote %s", path)
        written.append(path)
    return written


@dataclass(frozen=True)
class CompgenRequest:
    """Parsed `compgen` arguments."""

    shell: str
    destination: Path | None = None  # None: print the script
    default_location: bool = False


def parse_compgen_args(args: str) -> CompgenRequest:
    """Parse `compgen <shell> [default|path]`.

    Args:
        args: Arguments after "compgen" (e.g., "zsh" or "zsh default")

    Returns:
        The requested shell and destination

    Raises:
        BrewcompError: On a missing or unsupported shell, or a relative path
    """
    words = args.split(None, 1)
    if not words:
        raise BrewcompError(f"Usage: compgen <{'|'.join(SUPPORTED_SHELLS)}> [default|path]")

    shell = words[0]
    if shell not in SUPPORTED_SHELLS:
        raise BrewcompError(f"Unsupported shell: {shell}. Supported: {', '.join(SUPPORTED_SHELLS)}")
    if len(words) == 1:
        return CompgenRequest(shell)

    target = words[1].strip()
    if target == "default":
        return CompgenRequest(shell, Path(get_default_path(shell)), default_location=True)
    destination = Path(target).expanduser()
    if not destination.is_absolute():
        raise BrewcompError(f"Not an absolute path: {target} (use /path, ~/path or 'default')")
    return CompgenRequest(shell, destination)


def _display_path(path: Path) -> str:
    """Shorten a path under the home directory to `~/...`."""
    try:
        return f"~/{path.relative_to(Path.home())}"
    except ValueError:
        return str(path)


def _written_message(request: CompgenRequest, destination: Path) -> str:
    """Tell where the script went and, for default locations, how the shell finds it."""
    lines = [f"Wrote the {request.shell} completion script for brew to {_display_path(destination)}"]
    if request.default_location:
        directory = _display_path(destination.parent)
        if request.shell == "bash":
            lines.append(f"bash-completion loads it from {directory} in new shells.")
        else:
            lines.append(f"Add {directory} to fpath before compinit in ~/.zshrc:")
            lines.append(f"  fpath=({directory} $fpath)")
    return "\n".join(lines)


def handle_compgen(metadata: MetadataAccessor, args: str, template_dir: Path | None = None) -> tuple[bool, str]:
    """Handle the compgen command.

    Args:
        metadata: The command metadata
        args: Arguments after "compgen" (e.g., "zsh" or "zsh default")
        template_dir: Directory holding the templates, the packaged ones by default

    Returns:
        Tuple of (success, result):
        - No path arg: result is the script content
        - With path arg: result is success/error message
    """
    try:
        request = parse_compgen_args(args)
        content = GENERATORS[request.shell](sorted(metadata.commands(aliases=True)), metadata, template_dir)
    except ConfigurationError as e:
        return (False, f"Failed to generate completions: {e}")
    except BrewcompError as e:
        return (False, str(e))

    if request.destination is None:
        return (True, content)

    destination = request.destination
    get_logger("completions").debug("Writing completions to: %s", destination)
    try:
        atomic_write(destination, content)
    except OSError as e:
        return (False, f"Failed to write completion file: {e}")

    return (True, _written_message(request, destination))
