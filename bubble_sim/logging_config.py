"""Logging configuration for bubble-sim."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from bubble_sim.config import DEBUG, LOGS_DIR, LOG_LEVEL, LOG_FORMAT, LOG_TO_FILE


def setup_logging(
    name: str = "bubble_sim",
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    to_file: Optional[bool] = None,
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to DEBUG when the DEBUG env flag is set, else LOG_LEVEL
        log_file: Path to log file, implies ``to_file``
        to_file: Also write to a rotating log file (defaults to LOG_TO_FILE)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = "DEBUG" if DEBUG else LOG_LEVEL
    if to_file is None:
        to_file = LOG_TO_FILE or log_file is not None

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if to_file:
        if log_file is None:
            log_file = LOGS_DIR / f"{name}.log"

        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["setup_logging"]
