"""Named argument type and description parsing utilities."""

from __future__ import annotations

import re
from typing import Any

from ..logging_setup import get_logger
from .models import ArgKind, LiteralAlternative, NamedArgType, UnknownKind

__all__ = ["normalize_kind_name", "parse_named_arg_type", "parse_named_args", "short_description"]

# End of the first sentence: a period followed by whitespace or the end of text
_SENTENCE_END = re.compile(r"\.(?:\s|$)")

# Characters that would break out of `__brewcomp "a b"` or a zsh `(a b)` alternation
_UNSAFE_LITERAL = re.compile(r"[\s'\"`\\$()]")


def normalize_kind_name(name: str) -> str:
    """Normalize a kind tag to the ArgKind value format.

    E.g., "installed-formula" -> "installed_formula", "Cask" -> "cask"
    """
    return name.strip().lower().replace("-", "_")


def parse_named_arg_type(raw: Any) -> NamedArgType | None:  # noqa: ANN401
    """Turn one manifest `named_args` entry into a typed value.

    Plain strings are literal alternatives, tables carrying a `kind` key are
    semantic kinds. Literals must be single shell words without quotes,
    backslashes, `$` or parentheses. Unrecognised kinds are kept as
    UnknownKind so that the generators can skip them; malformed entries
    are dropped.

    Args:
        raw: The entry as decoded from TOML/JSON

    Returns:
        The parsed type, or None if the entry is malformed
    """
    if isinstance(raw, str):
        if not raw or _UNSAFE_LITERAL.search(raw):
            get_logger("manifest").warning("Ignoring named argument literal that cannot be completed: %r", raw)
            return None
        return LiteralAlternative(raw)
    if isinstance(raw, dict) and isinstance(raw.get("kind"), str):
        kind_name = normalize_kind_name(raw["kind"])
        try:
            return ArgKind(kind_name)
        except ValueError:
            get_logger("manifest").debug("Unknown named argument kind: %s", raw["kind"])
            return UnknownKind(kind_name)
    get_logger("manifest").warning("Ignoring malformed named argument entry: %r", raw)
    return None


def parse_named_args(raw_list: list[Any] | None) -> list[NamedArgType] | None:
    """Parse a whole `named_args` list, keeping None as "no type information"."""
    if raw_list is None:
        return None
    types: list[NamedArgType] = []
    for raw in raw_list:
        parsed = parse_named_arg_type(raw)
        if parsed is not None:
            types.append(parsed)
    return types


def short_description(description: str) -> str:
    """Return the first sentence of a description, without its period.

    Args:
        description: The full command description

    Returns:
        The first sentence, or an empty string for a blank description
    """
    text = description.strip()
    if not text:
        return ""
    return _SENTENCE_END.split(text, maxsplit=1)[0].strip()
