"""
Tests for the opt-in logging setup.
"""

import logging

import pytest

from rebarmorph import setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("rebarmorph")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)


def test_console_handler_installed(clean_logger):
    logger = setup_logging(logging.DEBUG)
    assert logger is clean_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_repeated_setup_does_not_duplicate(clean_logger):
    setup_logging()
    setup_logging()
    assert len(clean_logger.handlers) == 1


def test_file_handler_writes(clean_logger, tmp_path):
    log_file = tmp_path / "morph.log"
    logger = setup_logging(logging.INFO, str(log_file))
    assert len(logger.handlers) == 2

    logging.getLogger("rebarmorph.morph").info("bar family ready")
    for handler in logger.handlers:
        handler.flush()
    assert "rebarmorph.morph - INFO - bar family ready" in log_file.read_text(encoding="utf-8")


def test_reconfigure_closes_previous_file_handler(clean_logger, tmp_path):
    setup_logging(logging.INFO, str(tmp_path / "first.log"))
    old_file_handler = next(h for h in clean_logger.handlers if isinstance(h, logging.FileHandler))
    setup_logging()
    assert old_file_handler not in clean_logger.handlers
    assert old_file_handler.stream is None
