"""Mini README: Shared pytest fixtures.

Keeps cached settings and ``POCKETLEDGER_`` environment variables from
leaking between tests.
"""

from __future__ import annotations

import os

import pytest

from pocketledger.configuration import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.upper().startswith("POCKETLEDGER_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
