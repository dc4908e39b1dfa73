"""Logging configuration."""

import logging
from typing import Optional

ROOT_LOGGER_NAME = "cvupgrade"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance."""
    root = logging.getLogger(ROOT_LOGGER_NAME)

    # Only configure if no handlers exist
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    return logging.getLogger(name or ROOT_LOGGER_NAME)


def set_log_level(level: int) -> None:
    """Set the level for every cvupgrade logger."""
    get_logger().setLevel(level)
