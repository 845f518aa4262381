"""
Centralized logging configuration for sitemap-builder
"""
from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "sitemap_builder"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)

    # Avoid adding handlers multiple times
    if not root.handlers:
        # stdout is reserved for rendered documents (see cli.py)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)

        # Format: [LEVEL] message
        formatter = logging.Formatter(
            "[%(levelname)s] %(message)s",
            datefmt="%H:%M:%S"
        )
        console_handler.setFormatter(formatter)

        root.addHandler(console_handler)
        root.setLevel(logging.INFO)

    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger under the package root logger.

    Args:
        name: Logger name, usually ``__name__`` of the calling module

    Returns:
        Logger whose records propagate to the configured root handler
    """
    _configure_root()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """
    Set the package log level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               or integer level
    """
    root = _configure_root()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)
