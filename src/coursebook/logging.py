# src/coursebook/logging.py
"""Logging setup for Coursebook.

Library modules use:
    from coursebook.logging import get_logger
    logger = get_logger(__name__)

Handlers are only installed by ``configure_logging``, which the CLI calls
once at startup. Applications embedding the library configure logging
themselves.
"""

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO = sys.stderr,
) -> None:
    """Install a stream handler on the ``coursebook`` logger.

    Safe to call more than once; only the level changes on later calls.
    """
    root = logging.getLogger("coursebook")
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the calling module."""
    return logging.getLogger(name)
