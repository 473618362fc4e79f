"""Mini README: Application-wide logging helpers for PocketLedger.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and adjusts its level.

Usage:
    Modules import ``get_logger`` to create contextual loggers. The handler is
    attached exactly once; later calls to ``configure_root_logger`` only move
    the level so the CLI can honour ``--log-level`` after modules have already
    created their loggers at import time.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False
_DEFAULT_LEVEL = logging.WARNING


def configure_root_logger(level: Union[int, str] = _DEFAULT_LEVEL) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
