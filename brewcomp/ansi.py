"""ANSI terminal color utilities.

Honours the NO_COLOR and FORCE_COLOR environment variables and disables
colors when the stream is not a TTY.
"""

import os
import sys
from typing import TextIO

__all__ = [
    "BLUE",
    "BOLD",
    "DIM",
    "RED",
    "RESET",
    "YELLOW",
    "LogStyles",
    "colorize",
    "make_style",
    "ohai",
    "should_colorize",
]

_ESC = "\x1b["

RESET = f"{_ESC}0m"

BOLD = "1"
DIM = "2"

RED = "31"
YELLOW = "33"
BLUE = "34"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell whether ANSI colors should be written to `stream` (stderr by default)."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, *codes: str) -> str:
    """Wrap text in ANSI color codes.

    Args:
        text: The text to colorize.
        *codes: ANSI codes to apply (e.g., RED, BOLD).

    Returns:
        The text wrapped in ANSI escape sequences, or unchanged without codes.
    """
    if not codes:
        return text
    return f"{_ESC}{';'.join(codes)}m{text}{RESET}"


def make_style(*codes: str) -> tuple[str, str]:
    """Return a (prefix, suffix) pair for use in log formatters."""
    if not codes:
        return ("", RESET)
    return (f"{_ESC}{';'.join(codes)}m", RESET)


def ohai(title: str, stream: TextIO | None = None) -> None:
    """Print a `==> title` header line, highlighted when the stream allows it."""
    if stream is None:
        stream = sys.stdout
    if should_colorize(stream):
        print(f"{colorize('==>', BLUE, BOLD)} {colorize(title, BOLD)}", file=stream)
    else:
        print(f"==> {title}", file=stream)


class LogStyles:
    """Pre-built styles for log levels."""

    WARNING = (YELLOW, DIM)
    ERROR = (RED, DIM)
    CRITICAL = (RED, BOLD)
