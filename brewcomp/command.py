"""brewcomp - generate brew completion scripts for bash and zsh."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from .commands import ManifestMetadata, load_manifest
from .completions import get_default_path, handle_compgen, update_shell_completions
from .completions.linking import link, link_completions, show_completions_message_if_needed, unlink
from .config import Configuration
from .config_loader import ConfigLoader
from .constants import DEFAULT_COMPLETIONS_DIR, DEFAULT_SETTINGS_FILE, DEFAULT_TAPS_DIR, SUPPORTED_SHELLS
from .logging_setup import get_logger, init_logger
from .models import BrewcompError, ConfigurationError, ExitCode
from .settings import Settings

__all__ = ["main"]

USAGE = """Syntax: brewcomp [--debug LOGFILE] [--config PATH] [--manifest PATH] <command>

Available commands:
 generate             Write the bash and zsh completion scripts
 compgen <shell> [default|path]
                      Print the completion script of a shell, or write it
 state                Tell whether tap completions are linked
 link                 Link the completion files of every tap
 unlink               Unlink the completion files of third-party taps
 help                 Show this message
"""


@dataclass
class Context:
    """Resolved settings for one run."""

    config: Configuration
    manifest_override: str = ""

    @property
    def template_dir(self) -> Path | None:
        return self.config.get_path("template_dir")

    @property
    def completions_dir(self) -> Path:
        return self.config.get_path("completions_dir") or DEFAULT_COMPLETIONS_DIR

    @property
    def taps_dir(self) -> Path:
        return self.config.get_path("taps_dir") or DEFAULT_TAPS_DIR

    @property
    def settings(self) -> Settings:
        return Settings(self.config.get_path("settings_file") or DEFAULT_SETTINGS_FILE)

    @property
    def link_dirs(self) -> dict[str, Path]:
        section = self.config.get_section("link_dirs")
        return {shell: section.get_path(shell) or Path(get_default_path(shell)).parent for shell in SUPPORTED_SHELLS}

    def metadata(self) -> ManifestMetadata:
        """Load the command manifest.

        Raises:
            ConfigurationError: If no manifest is configured or it cannot be loaded
        """
        manifest = Path(self.manifest_override).expanduser() if self.manifest_override else self.config.get_path("manifest")
        if manifest is None:
            raise ConfigurationError("No manifest configured: use --manifest or set `manifest` in the [brewcomp] section")
        return load_manifest(manifest)


def use_param(argv: list[str], txt: str) -> str:
    """Check if parameter `txt` is in argv.

    If found, removes it from argv & returns the argument value
    """
    v = ""
    if txt in argv:
        i = argv.index(txt)
        if i + 1 >= len(argv):
            raise BrewcompError(f"Missing value for {txt}")
        v = argv[i + 1]
        del argv[i : i + 2]
    return v


def run_command(ctx: Context, command: str, args: list[str]) -> ExitCode:
    """Run one brewcomp command.

    Args:
        ctx: The resolved run context
        command: The command name
        args: The remaining arguments

    Returns:
        The exit code
    """
    log = get_logger("brewcomp")

    if command == "generate":
        update_shell_completions(ctx.metadata(), ctx.completions_dir, ctx.template_dir)
        print(f"Completions written to {ctx.completions_dir}")
        show_completions_message_if_needed(ctx.settings, ctx.taps_dir)
        return ExitCode.SUCCESS

    if command == "compgen":
        success, result = handle_compgen(ctx.metadata(), " ".join(args), ctx.template_dir)
        if not success:
            log.error(result)
            return ExitCode.COMMAND_ERROR
        print(result, end="" if result.endswith("\n") else "\n")
        return ExitCode.SUCCESS

    if command == "state":
        if link_completions(ctx.settings):
            print("Completions are linked.")
        else:
            print("Completions are not linked.")
        return ExitCode.SUCCESS

    if command == "link":
        link(ctx.settings, ctx.taps_dir, ctx.link_dirs)
        print("Completions are now linked.")
        return ExitCode.SUCCESS

    if command == "unlink":
        unlink(ctx.settings, ctx.taps_dir, ctx.link_dirs)
        print("Completions are no longer linked.")
        return ExitCode.SUCCESS

    if command in {"help", "--help", "-h"}:
        print(USAGE, end="")
        return ExitCode.SUCCESS

    log.error("Unknown command: %s", command)
    print(USAGE, end="", file=sys.stderr)
    return ExitCode.USAGE_ERROR


def main(argv: list[str] | None = None) -> int:
    """Run the command."""
    argv = list(sys.argv[1:] if argv is None else argv)

    try:
        debug_flag = use_param(argv, "--debug")
        config_override = use_param(argv, "--config")
        manifest_override = use_param(argv, "--manifest")
    except BrewcompError as e:
        init_logger()
        get_logger("startup").critical("%s", e)
        return ExitCode.USAGE_ERROR

    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    log = get_logger("startup")

    if not argv:
        print(USAGE, end="", file=sys.stderr)
        return ExitCode.USAGE_ERROR

    try:
        loader = ConfigLoader(log)
        raw_config = loader.load(config_override)
        ctx = Context(
            config=Configuration(raw_config.get("brewcomp", {}), logger=log),
            manifest_override=manifest_override,
        )
        return run_command(ctx, argv[0], argv[1:])
    except ConfigurationError as e:
        log.critical("%s", e)
        return ExitCode.CONFIG_ERROR
    except BrewcompError as e:
        log.critical("Command failed: %s", e)
        return ExitCode.COMMAND_ERROR
    except OSError as e:
        log.critical("Command failed: %s", e)
        return ExitCode.COMMAND_ERROR


if __name__ == "__main__":
    sys.exit(main())
