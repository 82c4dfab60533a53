"""Tests for application logging setup."""

import logging
import logging.handlers

import pytest

from pomodoro.log import configure_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("pomodoro")
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved
    logger.propagate = True


def test_writes_to_log_dir(tmp_path, clean_logger):
    logger = configure_logging(log_dir=tmp_path / "logs")
    assert logger is clean_logger
    logging.getLogger("pomodoro.timer.engine").info("countdown finished: work")
    for handler in logger.handlers:
        handler.flush()
    text = (tmp_path / "logs" / "pomodoro.log").read_text(encoding="utf-8")
    assert "countdown finished: work" in text
    assert "[pomodoro.timer.engine]" in text


def test_handlers_installed_once(tmp_path, clean_logger):
    configure_logging(log_dir=tmp_path)
    configure_logging(log_dir=tmp_path)
    rotating = [
        h for h in clean_logger.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(rotating) == 1
