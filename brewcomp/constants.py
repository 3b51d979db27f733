"""Shared constants for brewcomp."""

import os
from pathlib import Path

__all__ = [
    "COMPLETIONS_EXCLUSION_LIST",
    "CONFIG_FILE",
    "DEFAULT_COMPLETIONS_DIR",
    "DEFAULT_SETTINGS_FILE",
    "DEFAULT_TAPS_DIR",
    "DEPRECATED_COMMAND_PREFIX",
    "OFFICIAL_TAP_USER",
    "SUPPORTED_SHELLS",
    "TEMPLATE_DIR",
]

# Config file paths - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
_xdg_data_home = Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")

CONFIG_FILE = _xdg_config_home / "brewcomp" / "config.toml"
DEFAULT_SETTINGS_FILE = _xdg_config_home / "brewcomp" / "settings.json"
DEFAULT_COMPLETIONS_DIR = _xdg_data_home / "brewcomp" / "completions"
DEFAULT_TAPS_DIR = _xdg_data_home / "brewcomp" / "taps"

# Packaged completion templates
TEMPLATE_DIR = Path(__file__).parent / "templates"

# Supported shells for completion generation
SUPPORTED_SHELLS = ("bash", "zsh")

# Commands never worth completing
COMPLETIONS_EXCLUSION_LIST = (
    "instal",
    "uninstal",
    "update-report",
)

# Prefix of the removed `brew cask <command>` family
DEPRECATED_COMMAND_PREFIX = "cask "

# Taps owned by this user are never unlinked
OFFICIAL_TAP_USER = "homebrew"
