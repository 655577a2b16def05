"""Package-wide logging for citypath.

All module loggers hang below the ``citypath`` logger, which owns the only
handler (stdout). Levels are changed in one place with
``set_global_log_level``; the CLI maps ``--verbose`` and ``--quiet`` onto it.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_NAME = "citypath"

# Set once the citypath handler is installed; cleared by reset_logging()
_configured = False


def setup_root_logger(level: int = logging.INFO) -> None:
    """Install the stdout handler on the ``citypath`` logger.

    Only the first call after import (or after ``reset_logging``) has an
    effect, so a level chosen through ``set_global_log_level`` is kept.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    # caplog relies on propagation to the logging root
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, deferring its level to ``citypath``."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the ``citypath`` logger and its handlers."""
    setup_root_logger()

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch every citypath logger to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return every citypath logger to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the citypath handler and level so the next call reinstalls them."""
    global _configured
    _configured = False

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
