"""Configuration wrapper providing typed access."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import logging

__all__ = ["BOOL_FALSE_STRINGS", "Configuration", "coerce_to_bool"]

ConfigValueType = float | bool | str | list | dict

BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})


def coerce_to_bool(value: ConfigValueType | None, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
        - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


class Configuration(dict):
    """The `[brewcomp]` section of the configuration, with typed accessors."""

    def __init__(self, *args: Any, logger: logging.Logger, **kwargs: Any) -> None:  # noqa: ANN401
        super().__init__(*args, **kwargs)
        self.log = logger

    def get_path(self, name: str, default: Path | None = None) -> Path | None:
        """Get a filesystem path, expanding `~`.

        Args:
            name: The key name
            default: Default value if key is missing or not a string

        Returns:
            The expanded path, or `default`
        """
        value = self.get(name)
        if value is None:
            return default
        if not isinstance(value, str):
            self.log.warning("Invalid path value for %s: %s", name, value)
            return default
        return Path(value).expanduser()

    def get_section(self, name: str) -> Configuration:
        """Return a nested table as a Configuration (empty if missing)."""
        value = self.get(name)
        if not isinstance(value, dict):
            if value is not None:
                self.log.warning("Expected a table for %s, got: %s", name, value)
            value = {}
        return Configuration(value, logger=self.log)
