"""Mini README: Interactive interfaces for PocketLedger.

Exports the console session that powers the menu-driven CLI. Other front
ends should call ``FinanceTracker`` the same way and live alongside it.
"""

from .console import ConsoleSession

__all__ = ["ConsoleSession"]
