"""Mini README: FIFO queue of free-text reminders.

Structure:
    * ReminderQueue - accepts reminders and hands them back once, oldest first.

Reminders are not tied to transactions. Processing is a destructive read:
``drain_all`` empties the queue and there is no way to look at pending
reminders without consuming them.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class ReminderQueue:
    """Hold pending reminders until they are processed."""

    def __init__(self) -> None:
        self._reminders: Deque[str] = deque()

    def enqueue(self, text: str) -> None:
        """Append a reminder to the back of the queue."""

        self._reminders.append(text)

    def drain_all(self) -> List[str]:
        """Remove and return every reminder in insertion order."""

        drained: List[str] = []
        while self._reminders:
            drained.append(self._reminders.popleft())
        LOGGER.debug("Drained %s reminders", len(drained))
        return drained

    def __len__(self) -> int:
        return len(self._reminders)
