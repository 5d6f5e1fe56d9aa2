"""
Logging helpers shared by the aioniban components.

Each component asks for a named logger (``aioniban.<component>``). The root
``aioniban`` logger gets a single stream handler the first time a message is
logged, with its level taken from ``AIONIBAN_LOG_LEVEL``.
"""

import logging
import os

from aioniban import config

ROOT_LOGGER_NAME = "aioniban"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)


def _setup_logging():
    """Setup logging configuration for the library."""
    if not _root_logger.handlers:
        handler = logging.StreamHandler()

        debug_level = os.getenv("AIONIBAN_LOG_LEVEL", config.LOG_LEVEL).upper()
        _root_logger.setLevel(getattr(logging, debug_level, logging.INFO))

        # Structured formatting
        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        _root_logger.addHandler(handler)


def get_logger(component: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    _setup_logging()
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
