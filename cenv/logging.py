"""Logging setup for the cenv command line tool.

The console only shows warnings unless ``--verbose`` is given, since the CLI
prints its own one-line result. A log file, when requested, records every
switch at INFO (or DEBUG when verbose).
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "cenv"
CONSOLE_FORMAT = "[cenv] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``cenv`` or one of its children, e.g. ``cenv.switcher``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install the console handler, plus a file handler when ``log_file`` is set.

    Handlers from an earlier call are closed and dropped first.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    _drop_handlers(logger)

    console_level = logging.DEBUG if verbose else logging.WARNING
    handlers = [_console_handler(console_level)]
    if log_file is not None:
        handlers.append(_file_handler(log_file, logging.DEBUG if verbose else logging.INFO))

    # The logger passes everything its most permissive handler wants.
    logger.setLevel(min(handler.level for handler in handlers))
    logger.propagate = False
    for handler in handlers:
        logger.addHandler(handler)
    return logger


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(path: Path, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["configure_logging", "get_logger"]
