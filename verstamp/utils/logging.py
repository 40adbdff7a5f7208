"""Logging configuration for VERSTAMP.

File logging is opt-in. Set VERSTAMP_LOG=true to enable it; the log file
defaults to ~/.verstamp.log and can be moved with VERSTAMP_LOG_FILE.
Module loggers created with ``logging.getLogger(__name__)`` inside the
package are children of the ``verstamp`` logger and share its handler.
"""

import logging
import os
from pathlib import Path

LOG_ENABLED = os.environ.get("VERSTAMP_LOG", "false").lower() in ("true", "1", "yes")
LOG_FILE = Path(os.environ.get("VERSTAMP_LOG_FILE", str(Path.home() / ".verstamp.log")))
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Configure and return the package logger.

    Safe to call more than once: handlers from a previous setup are
    closed and replaced, so reloading the module does not duplicate output.
    """
    global _logger

    logger = logging.getLogger("verstamp")
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Return the package logger, setting it up on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str, level: int = logging.INFO) -> None:
    """Write a message to the log file (no-op when logging is disabled)."""
    get_logger().log(level, message)


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "get_logger",
    "log_message",
]
