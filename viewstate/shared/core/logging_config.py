"""Logging setup for the console demo and anything embedding the package.

File handler: everything at the configured level, rotated at 10MB.
Console handler: only warnings and errors, so it does not fight the UI.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional, Union

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(level: Optional[str]) -> int:
    """Map a level name to a logging level, falling back to INFO."""
    return _LOG_LEVELS.get((level or "INFO").upper(), logging.INFO)


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Configure the root logger.

    Args:
        level: Level name; ``LOG_LEVEL`` env var when omitted
        log_file: Optional path of a rotating log file

    Returns:
        The configured root logger
    """
    file_log_level = resolve_level(level or os.getenv("LOG_LEVEL"))

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    root_logger.addHandler(console_handler)

    # asyncio debug chatter is noise for the demo screens
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"Logging configured: file={log_file or 'none'}, console=WARNING+"
    )
    return root_logger
