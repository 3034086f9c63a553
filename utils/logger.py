"""
SPACEWATCH — Structured logging.
"""

import logging
import sys

from config.settings import LOG_DIR, LOG_LEVEL, LOG_TO_FILE


def get_logger(name: str, level: int | str = LOG_LEVEL) -> logging.Logger:
    """Create a structured logger that writes to console and, optionally, file."""
    logger = logging.getLogger(f"spacewatch.{name}")

    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)-32s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    # File handler
    if LOG_TO_FILE:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_DIR / "spacewatch.log", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
