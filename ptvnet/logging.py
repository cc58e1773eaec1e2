"""Logging setup shared by all ptvnet modules.

Every module logs through ``get_logger(__name__)``, so all records end up
under the ``ptvnet`` logger. That logger owns exactly one handler, writing to
stderr: the ``extract`` command prints graph data on stdout, and log lines
must never mix into it.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "ptvnet"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed on the package logger, None until set up
_handler: Optional[logging.Handler] = None


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the package handler on the ``ptvnet`` logger.

    Does nothing if a handler is already installed; call
    :func:`reset_logging` first to replace it.

    Args:
        level: Level of the package logger.
        format_string: Record format; defaults to :data:`DEFAULT_FORMAT`.
        handler: Handler to install; defaults to a stderr stream handler.
    """
    global _handler

    if _handler is not None:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(level)

    _handler = handler if handler is not None else logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(_handler)

    # pytest's caplog listens on the logging root
    package_logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, set up to defer to the package level.

    Args:
        name: Dotted module name, normally ``__name__``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handler."""
    setup_root_logger()
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
    if _handler is not None:
        _handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch the package to DEBUG, as the CLI's ``--verbose`` does."""
    set_global_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Remove the package handler and level (used by tests)."""
    global _handler

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler = None
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
