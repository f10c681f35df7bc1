"""
Logging utilities for the Invoice Form.

Every module logger is a child of the ``invoice_form`` package logger, which
owns the single stream handler. The level comes from LOG_LEVEL and can be
changed at runtime with set_level().
"""

import logging
import os
from pathlib import Path

ROOT_LOGGER_NAME = "invoice_form"

# Default log level from environment or INFO
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def logger(name: str) -> logging.Logger:
    """
    Return the logger for a module of the package.

    Args:
        name: Logger name or __file__ path; paths become
              ``invoice_form.<module>``.

    Returns:
        logging.Logger propagating to the package logger.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    _root()
    return logging.getLogger(name)


def set_level(level: str | int) -> None:
    """Change the level of every package logger, e.g. set_level("DEBUG")."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _root().setLevel(level)


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        root.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)
    return root
