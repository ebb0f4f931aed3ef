"""Centralized logging configuration for spfgraph.

spfgraph is a library, so its package logger defaults to WARNING and writes
to stderr: a normal solve stays silent and only the negative-cost warning
surfaces. Applications raise verbosity with ``enable_debug_logging()`` or
``set_global_log_level()``.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "spfgraph"

DEFAULT_LEVEL = logging.WARNING

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = DEFAULT_LEVEL,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the 'spfgraph' logger.

    Only the first call configures anything; use ``reset_logging()`` to
    start over.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stderr).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees solver records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the 'spfgraph' hierarchy.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Logger that inherits level and handler from 'spfgraph'.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all spfgraph loggers and their handler.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.WARNING).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show solver start/summary records (and relaxation traces if enabled)."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to the library default level."""
    set_global_log_level(DEFAULT_LEVEL)


def reset_logging() -> None:
    """Drop the package handler and level (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
