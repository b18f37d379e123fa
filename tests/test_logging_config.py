"""Tests for root logger configuration."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from logging_config import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_handler(root_logger: logging.Logger) -> None:
    setup_logging("debug")
    assert root_logger.level == logging.DEBUG
    (handler,) = root_logger.handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stdout


def test_repeated_setup_does_not_duplicate(root_logger: logging.Logger) -> None:
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    assert len(root_logger.handlers) == 1


def test_unknown_level_falls_back_to_info(root_logger: logging.Logger) -> None:
    setup_logging("CHATTY")
    assert root_logger.level == logging.INFO


def test_file_handler(root_logger: logging.Logger, tmp_path: Path) -> None:
    log_file = tmp_path / "patto.log"
    setup_logging(logging.INFO, str(log_file))
    logging.getLogger("digitizing.session").info("hello from test")
    for handler in root_logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "digitizing.session - INFO - hello from test" in text
