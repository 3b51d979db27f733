"""Completion script templates.

Templates are plain shell scripts with `{{ slot }}` placeholders, each on a
line of its own. Rendering replaces a placeholder line with the slot's text
blocks, indented like the placeholder.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..constants import TEMPLATE_DIR
from ..models import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

__all__ = ["TEMPLATE_SLOTS", "CompletionTemplate", "load_template"]

TEMPLATE_SLOTS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "bash": frozenset({"completion_functions", "function_mappings"}),
        "zsh": frozenset({"aliases", "builtin_command_descriptions", "completion_functions"}),
    }
)

_PLACEHOLDER = re.compile(r"^(?P<indent>[ \t]*)\{\{\s*(?P<slot>\w+)\s*\}\}[ \t]*$", re.MULTILINE)
_ANY_TAG = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def _indent_block(blocks: Sequence[str], indent: str) -> str:
    """Join text blocks with newlines, indenting every non-empty line.

    A block ending with a newline is followed by an empty line.
    """
    lines: list[str] = []
    for block in blocks:
        lines.extend(block.split("\n"))
    return "\n".join(f"{indent}{line}" if line else line for line in lines).rstrip("\n")


@dataclass(frozen=True)
class CompletionTemplate:
    """A parsed completion template for one shell."""

    shell: str
    source: str
    path: Path

    @property
    def slots(self) -> frozenset[str]:
        """Return the slot names used by the template."""
        return frozenset(match.group("slot") for match in _PLACEHOLDER.finditer(self.source))

    def validate(self) -> None:
        """Check the template uses exactly the slots declared for its shell.

        Raises:
            ConfigurationError: If a slot is missing, unknown or not alone on its line
        """
        expected = TEMPLATE_SLOTS[self.shell]
        if len(_ANY_TAG.findall(self.source)) != len(_PLACEHOLDER.findall(self.source)):
            raise ConfigurationError(f"Placeholders must stand alone on their line in {self.path}", resource=self.path)
        if missing := expected - self.slots:
            raise ConfigurationError(f"Template {self.path} is missing slots: {', '.join(sorted(missing))}", resource=self.path)
        if unknown := self.slots - expected:
            raise ConfigurationError(f"Template {self.path} uses unknown slots: {', '.join(sorted(unknown))}", resource=self.path)

    def render(self, **slots: Sequence[str]) -> str:
        """Fill every slot with its text blocks.

        Args:
            **slots: One sequence of pre-rendered text blocks per slot

        Returns:
            The complete script

        Raises:
            ConfigurationError: If a slot of the template has no value
        """
        if missing := self.slots - slots.keys():
            raise ConfigurationError(f"No value for slots: {', '.join(sorted(missing))}", resource=self.path)

        def replace(match: re.Match[str]) -> str:
            return _indent_block(slots[match.group("slot")], match.group("indent"))

        return _PLACEHOLDER.sub(replace, self.source)


def load_template(shell: str, template_dir: Path | None = None) -> CompletionTemplate:
    """Read and validate the template of a shell.

    Args:
        shell: Shell type ("bash" or "zsh")
        template_dir: Directory holding `<shell>.tmpl`, the packaged templates by default

    Returns:
        The validated template

    Raises:
        ConfigurationError: If the template is missing, unreadable or corrupt
    """
    if shell not in TEMPLATE_SLOTS:
        raise ConfigurationError(f"Unsupported shell: {shell}")
    path = (template_dir or TEMPLATE_DIR) / f"{shell}.tmpl"
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read completion template {path}: {e}", resource=path) from e
    template = CompletionTemplate(shell=shell, source=source, path=path)
    template.validate()
    return template
