"""
Logging configuration for the Binance REST client and its front ends.

Sets up dual logging:
  - Console : INFO-level, concise format
  - File    : DEBUG-level, detailed format with timestamps, auto-rotated

Log files go to ``<project-root>/logs/`` unless another directory is given
and rotate at 5 MB, keeping the last 5 backups.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "binance_rest"
LOG_DIR = Path(__file__).resolve().parent.parent / "logs"

_MAX_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5


def setup_logging(
    log_level: int = logging.DEBUG,
    log_dir: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure and return the ``binance_rest`` logger.

    Parameters
    ----------
    log_level : int
        Minimum level for the *file* handler (console is always INFO).
    log_dir : path, optional
        Directory for ``binance_rest.log``; defaults to ``LOG_DIR``.

    Returns
    -------
    logging.Logger
        The package logger.  Calling again returns it unchanged.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if logger.handlers:
        return logger

    directory = Path(log_dir) if log_dir is not None else LOG_DIR
    directory.mkdir(parents=True, exist_ok=True)

    log_file = directory / "binance_rest.log"
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s.%(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.debug("Logging initialised - file: %s", log_file)
    return logger
