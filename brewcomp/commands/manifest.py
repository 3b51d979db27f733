"""Manifest-backed command metadata.

A manifest is a TOML (or JSON) document describing every command:

    [aliases]
    ls = "list"

    [commands.install]
    description = "Install a <formula> or <cask>."
    options = [["--debug", "Display any debugging information."]]
    named_args = [{kind = "formula"}, {kind = "cask"}]
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from ..logging_setup import get_logger
from ..models import ConfigurationError
from .models import CommandInfo, NamedArgType, RawOption
from .parsing import parse_named_args, short_description

__all__ = ["ManifestMetadata", "load_manifest"]


def _parse_options(name: str, raw_options: Any) -> list[RawOption]:  # noqa: ANN401
    """Read the `options` list of a command: [flag, description] pairs."""
    if raw_options is None:
        return []
    if not isinstance(raw_options, list):
        raise ConfigurationError(f"Command {name!r}: options must be a list")
    options: list[RawOption] = []
    for raw in raw_options:
        if isinstance(raw, str):
            options.append((raw, ""))
        elif isinstance(raw, list) and all(isinstance(part, str) for part in raw):
            options.append(tuple(raw[:2]))
        else:
            raise ConfigurationError(f"Command {name!r}: invalid option entry {raw!r}")
    return options


def _parse_command(name: str, data: Any) -> CommandInfo:  # noqa: ANN401
    """Build a CommandInfo from its manifest table."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Command {name!r}: expected a table, got {type(data).__name__}")
    named_args = data.get("named_args")
    if named_args is not None and not isinstance(named_args, list):
        raise ConfigurationError(f"Command {name!r}: named_args must be a list")
    description = data.get("description")
    if description is None:
        description = ""
    elif not isinstance(description, str):
        raise ConfigurationError(f"Command {name!r}: description must be a string")
    return CommandInfo(
        name=name,
        options=_parse_options(name, data.get("options")),
        named_args=parse_named_args(named_args),
        description=description,
    )


class ManifestMetadata:
    """MetadataAccessor reading from a decoded manifest.

    Alias names resolve to the metadata of their target command.
    """

    def __init__(self, commands: dict[str, CommandInfo], aliases: dict[str, str] | None = None) -> None:
        self._commands = commands
        self._aliases = dict(aliases or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ManifestMetadata:
        """Build the metadata from a decoded manifest document.

        Raises:
            ConfigurationError: If the document does not follow the manifest format
        """
        raw_commands = data.get("commands", {})
        raw_aliases = data.get("aliases", {})
        if not isinstance(raw_commands, dict) or not isinstance(raw_aliases, dict):
            raise ConfigurationError("Manifest: `commands` and `aliases` must be tables")
        commands = {name: _parse_command(name, value) for name, value in raw_commands.items()}
        aliases = {str(alias): str(target) for alias, target in raw_aliases.items()}
        return cls(commands, aliases)

    def _info(self, command: str) -> CommandInfo | None:
        return self._commands.get(self._aliases.get(command, command))

    def commands(self, aliases: bool = False) -> list[str]:
        names = list(self._commands)
        if aliases:
            names.extend(alias for alias in self._aliases if alias not in self._commands)
        return names

    def command_options(self, command: str) -> list[RawOption] | None:
        info = self._info(command)
        return None if info is None else info.options

    def named_args_type(self, command: str) -> list[NamedArgType] | None:
        info = self._info(command)
        return None if info is None else info.named_args

    def command_description(self, command: str, short: bool = False) -> str | None:
        info = self._info(command)
        if info is None:
            return None
        return short_description(info.description) if short else info.description

    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)


def load_manifest(path: Path) -> ManifestMetadata:
    """Load a manifest file (.json files as JSON, anything else as TOML).

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    log = get_logger("manifest")
    log.info("Loading manifest %s", path)
    try:
        if path.suffix == ".json":
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            with path.open("rb") as f:
                data = tomllib.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read manifest {path}: {e}", resource=path) from e
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Invalid manifest {path}: {e}", resource=path) from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid manifest {path}: expected a table at top level", resource=path)
    try:
        return ManifestMetadata.from_dict(data)
    except ConfigurationError as e:
        raise ConfigurationError(f"{path}: {e}", resource=path) from e
