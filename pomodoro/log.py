"""Application-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; nothing is written
until the entry point calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "Pomodoro"
_LOGGER_NAME = "pomodoro"
_LOG_FILE = "pomodoro.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 3

LOG_DIR = Path(user_log_dir(_APP_NAME))


def configure_logging(
    level: int = logging.INFO,
    *,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Attach a rotating file handler and a stderr handler to the package logger."""
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console.setLevel(logging.WARNING)
    logger.addHandler(console)
    return logger
