#!/usr/bin/env python3
"""
Purpose:
    Configures the `mmom` logger: a console handler (WARNING, or INFO when
    verbose) and an append-only log file at INFO.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from mmom.core.constants import DEFAULT_TEXT_ENCODING, LOG_DIR_ENV, LOG_FILENAME

ROOT_LOGGER_NAME = "mmom"

_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def log_file_path(default_dir: Path) -> Path:
    """`$MMOM_LOG_DIR/mmomlog.log` if set, else `<default_dir>/mmomlog.log`."""
    override = os.getenv(LOG_DIR_ENV)
    base = Path(override).expanduser() if override else Path(default_dir)
    return base / LOG_FILENAME


def init_logging(log_dir: Optional[Path], *, verbose: bool = False) -> logging.Logger:
    """
    (Re)configure the `mmom` logger. Safe to call more than once.

    Args:
        log_dir: Directory for the log file; None disables file logging.
        verbose: Lower the console threshold from WARNING to INFO.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(logging.INFO if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_dir is not None:
        path = log_file_path(log_dir)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, mode="a", encoding=DEFAULT_TEXT_ENCODING)
        except OSError as e:
            logger.warning("Log file %s unavailable: %s", path, e)
        else:
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
            logger.addHandler(file_handler)

    return logger
