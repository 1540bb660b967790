# ───────────────────────── src/writingchecker/logging_utils.py ─────────────────────────
"""
Logging utilities with rotating file handler.

Every module logs through a child of the "writingchecker" logger, so one
handler installed here collects debug output from the corrector and errors
from the command line alike.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .config import Config

LOGGER_NAME = "writingchecker"


def _file_handler(config: Config) -> logging.Handler:
    log_path = Path(config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # delay: the log file only appears once something is written to it
    handler = logging.handlers.RotatingFileHandler(
        filename=str(log_path),
        maxBytes=config.max_log_size,
        backupCount=config.log_backup_count,
        encoding="utf-8",
        delay=True,
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


def setup_logger(config: Optional[Config] = None) -> logging.Logger:
    """Set up the package logger with a rotating log file.

    The handler is installed once per process; later calls only update the
    level, so a --log-level given on the command line always takes effect.

    Args:
        config: Configuration object, uses defaults if None

    Returns:
        Configured logger instance

    Raises:
        OSError: If the log directory cannot be created
    """
    if config is None:
        config = Config()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, config.log_level))

    if not logger.handlers:
        logger.addHandler(_file_handler(config))

    return logger


def log_error(
    message: str, exception: Optional[Exception] = None, config: Optional[Config] = None
) -> None:
    """Log an error message with optional exception details.

    Args:
        message: Error message to log
        exception: Optional exception whose traceback is included
        config: Configuration object, uses defaults if None
    """
    logger = setup_logger(config)

    if exception:
        logger.error(f"{message}: {str(exception)}", exc_info=exception)
    else:
        logger.error(message)
