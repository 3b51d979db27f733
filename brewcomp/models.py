"""Error types and exit codes."""

from enum import IntEnum
from pathlib import Path

__all__ = ["BrewcompError", "ConfigurationError", "ExitCode"]


class BrewcompError(Exception):
    """Base class for brewcomp errors."""


class ConfigurationError(BrewcompError):
    """A required resource (template, manifest, config file) is missing or unusable.

    Aborts the whole generation run: nothing gets written.
    """

    def __init__(self, message: str, resource: Path | str | None = None) -> None:
        super().__init__(message)
        self.resource = resource


class ExitCode(IntEnum):
    """Exit codes for the brewcomp command."""

    SUCCESS = 0
    USAGE_ERROR = 1  # Unknown command, invalid arguments
    CONFIG_ERROR = 2  # Missing template, manifest or config file
    COMMAND_ERROR = 3  # Command execution failed
