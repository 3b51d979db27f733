"""Logging setup and debug mode state."""

import logging
import os

from .ansi import LogStyles, make_style, should_colorize

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
    "is_debug",
    "set_debug",
]


class _DebugState:
    """Container for mutable debug state to avoid global statement."""

    value: bool = bool(os.environ.get("BREWCOMP_DEBUG"))


_debug_state = _DebugState()


def is_debug() -> bool:
    """Return the current debug state."""
    return _debug_state.value


def set_debug(value: bool) -> None:
    """Set the debug state."""
    _debug_state.value = value


class LogObjects:
    """Handlers shared by every brewcomp logger."""

    handlers: list[logging.Handler] = []


class ScreenLogFormatter(logging.Formatter):
    """Console formatter, coloring warnings and errors when the terminal allows it."""

    def __init__(self) -> None:
        super().__init__()
        log_format = r"%(name)18s - %(message)s // %(filename)s:%(lineno)d" if is_debug() else r"%(message)s"
        if should_colorize():
            warn_pre, warn_suf = make_style(*LogStyles.WARNING)
            err_pre, err_suf = make_style(*LogStyles.ERROR)
            crit_pre, crit_suf = make_style(*LogStyles.CRITICAL)
        else:
            warn_pre = warn_suf = err_pre = err_suf = crit_pre = crit_suf = ""

        self._formatters = {
            logging.DEBUG: logging.Formatter(log_format),
            logging.INFO: logging.Formatter(log_format),
            logging.WARNING: logging.Formatter(warn_pre + log_format + warn_suf),
            logging.ERROR: logging.Formatter(err_pre + log_format + err_suf),
            logging.CRITICAL: logging.Formatter(crit_pre + log_format + crit_suf),
        }

    def format(self, record: logging.LogRecord) -> str:
        formatter = self._formatters.get(record.levelno, self._formatters[logging.INFO])
        return formatter.format(record)


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force debug level
    """
    if force_debug:
        set_debug(True)

    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter())
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "brewcomp", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name (str): logger's name
        level (int): logger's level (auto if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name)
    if level is None:
        logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    else:
        logger.setLevel(level)
    logger.propagate = False
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger
