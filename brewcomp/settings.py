"""Persisted on/off settings (e.g. whether tap completions are linked)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast

from .logging_setup import get_logger
from .models import ConfigurationError
from .utils import atomic_write

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ["Settings"]


class Settings:
    """Key/value settings stored in a JSON file.

    The file is read on every access and rewritten as a whole on changes.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.log = get_logger("settings")

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read settings {self.path}: {e}", resource=self.path) from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid settings {self.path}: expected an object", resource=self.path)
        return cast("dict[str, Any]", data)

    def _save(self, data: dict[str, Any]) -> None:
        atomic_write(self.path, json.dumps(data, indent=2, sort_keys=True) + "\n")

    def read(self, key: str) -> Any:  # noqa: ANN401
        """Return the value of `key`, or None if unset."""
        return self._load().get(key)

    def write(self, key: str, value: Any) -> None:  # noqa: ANN401
        """Set `key` to `value`."""
        data = self._load()
        data[key] = value
        self.log.debug("Setting %s = %r", key, value)
        self._save(data)
