"""Configuration file loading utilities.

Loads, parses and merges the TOML configuration files.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_FILE
from .models import ConfigurationError
from .utils import merge

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader"]


class ConfigLoader:
    """Handles loading and merging configuration files.

    Supports:
    - a single TOML file
    - a directory of .toml files, merged in name order
    - `include` directives in the `[brewcomp]` section
    """

    def __init__(self, log: logging.Logger) -> None:
        self.log = log
        self._config: dict[str, Any] = {}

    @property
    def config(self) -> dict[str, Any]:
        """Return the loaded configuration."""
        return self._config

    def load(self, config_filename: str = "") -> dict[str, Any]:
        """Load configuration from file or directory.

        Args:
            config_filename: Optional path to config file or directory.
                           If empty, uses the default CONFIG_FILE location,
                           which may be absent.

        Returns:
            The loaded and merged configuration dictionary.

        Raises:
            ConfigurationError: If an explicit config file is missing or a file has syntax errors.
        """
        if config_filename:
            config = self._open_config(Path(os.path.expandvars(config_filename)).expanduser())
        elif CONFIG_FILE.exists():
            config = self._open_config(CONFIG_FILE)
        else:
            self.log.debug("No config file at %s, using defaults", CONFIG_FILE)
            config = {}
        merge(self._config, config)
        return self._config

    def _open_config(self, fname: Path) -> dict[str, Any]:
        """Load config file(s) into a dictionary, following includes."""
        config = self._load_config_directory(fname) if fname.is_dir() else self._load_config_file(fname)

        for extra_config in list(config.get("brewcomp", {}).get("include", [])):
            merge(config, self._open_config(Path(os.path.expandvars(extra_config)).expanduser()))

        return config

    def _load_config_directory(self, directory: Path) -> dict[str, Any]:
        """Load and merge all .toml files from a directory."""
        config: dict[str, Any] = {}
        for toml_file in sorted(f.name for f in directory.iterdir()):
            if not toml_file.endswith(".toml"):
                continue
            merge(config, self._load_config_file(directory / toml_file))
        return config

    def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single TOML configuration file.

        Raises:
            ConfigurationError: If file not found or has syntax errors
        """
        if not fname.exists():
            self.log.critical("Config file not found: %s", fname)
            raise ConfigurationError(f"Config file not found: {fname}", resource=fname)

        self.log.info("Loading %s", fname)
        with fname.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                self.log.critical("Problem reading %s: %s", fname, e)
                raise ConfigurationError(f"Invalid TOML in {fname}: {e}", resource=fname) from e
