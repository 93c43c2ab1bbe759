"""Tests for cenv.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from cenv.logging import configure_logging, get_logger


def test_get_logger_nests_under_cenv() -> None:
    assert get_logger().name == "cenv"
    assert get_logger("switcher").name == "cenv.switcher"


def test_configure_logging_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.DEBUG


def test_configure_logging_writes_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "cenv.log"
    logger = configure_logging(log_file=log_file)

    get_logger("switcher").info("env switched")
    for handler in logger.handlers:
        handler.flush()

    assert logger.handlers[0].level == logging.WARNING
    assert "INFO cenv.switcher: env switched" in log_file.read_text(encoding="utf-8")
    configure_logging()


def test_console_only_logger_stays_at_warning() -> None:
    logger = configure_logging()

    assert logger.level == logging.WARNING
    assert not logger.isEnabledFor(logging.INFO)
