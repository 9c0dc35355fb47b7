"""Centralized console logger.

Thin static facade over :mod:`loguru` so every module logs through the same
sink and level. The level is read from the ``LOG_LEVEL`` environment variable.
"""

import os
import sys

from loguru import logger


class Logger:
    """Static logging helpers shared across the code-base."""

    _FORMAT = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | <level>{message}</level>"
    )
    _SEPARATOR = "-" * 72
    _configured = False

    @staticmethod
    def _sink():
        if not Logger._configured:
            logger.remove()
            logger.add(
                sys.stderr,
                format=Logger._FORMAT,
                level=os.getenv("LOG_LEVEL", "DEBUG").strip().upper() or "DEBUG",
            )
            Logger._configured = True
        return logger

    @staticmethod
    def debug(message: str) -> None:
        """Log a debug message."""
        Logger._sink().opt(depth=1).debug(message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._sink().opt(depth=1).info(message)

    @staticmethod
    def success(message: str) -> None:
        """Log a success message."""
        Logger._sink().opt(depth=1).success(message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a warning message."""
        Logger._sink().opt(depth=1).warning(message)

    @staticmethod
    def error(message: str) -> None:
        """Log an error message."""
        Logger._sink().opt(depth=1).error(message)

    @staticmethod
    def separator() -> None:
        """Log a visual separator line."""
        Logger._sink().opt(depth=1).info(Logger._SEPARATOR)
