"""Mini README: Core package initializer for PocketLedger.

PocketLedger is an in-memory personal finance tracker. This module exposes
the tracker facade and the logging helper so callers do not need to know
the sub-package layout.
"""

from .logging_utils import get_logger
from .tracker import FinanceTracker

__all__ = ["FinanceTracker", "get_logger"]
