"""Logging setup for less-compiler.

Console output is colored by level; an optional log file receives the
detailed, uncolored format.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]

LOGGER_NAME = "less_compiler"

COLORS = {
    "DEBUG": "\033[0;36m",  # Cyan
    "INFO": "\033[0;34m",  # Blue
    "WARNING": "\033[1;33m",  # Yellow
    "ERROR": "\033[0;31m",  # Red
    "CRITICAL": "\033[1;31m",  # Bold Red
    "RESET": "\033[0m",  # Reset
}


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for console output."""

    def __init__(self, fmt: str, datefmt: str, colors: dict):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.colors = colors

    def format(self, record):
        # Color a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        color = self.colors.get(levelname, self.colors["RESET"])
        reset = self.colors["RESET"]
        record.levelname = f"{color}{levelname}{reset}"
        return super().format(record)


def get_file_formatter() -> logging.Formatter:
    """Get formatter for file logging (detailed, no colors)."""
    return logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def get_console_formatter() -> logging.Formatter:
    """Get formatter for console logging (colored, concise)."""
    return ColoredFormatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        colors=COLORS,
    )


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[PathLike] = None,
    stream=None,
) -> logging.Logger:
    """Configure the ``less_compiler`` logger.

    Replaces any handlers installed by an earlier call, so repeated CLI
    invocations in one process do not duplicate output.

    Parameters
    ----------
    level : int or str
        Logging level or level name (DEBUG, INFO, WARNING, ...)
    log_file : PathLike, optional
        If given, also log to this file (parent directories are created)
    stream : file-like, optional
        Console stream. Default: sys.stderr

    Returns
    -------
    logging.Logger
        The package logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(get_console_formatter())
    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(get_file_formatter())
        logger.addHandler(file_handler)

    return logger
