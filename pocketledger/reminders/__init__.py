"""Mini README: Reminder handling for PocketLedger.

Exports the FIFO ``ReminderQueue`` used by the tracker.
"""

from .queue import ReminderQueue

__all__ = ["ReminderQueue"]
