"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pocketledger.configuration import TrackerSettings, get_settings


def test_defaults_render_amounts_like_a_stream() -> None:
    settings = TrackerSettings()

    assert settings.log_level == "WARNING"
    assert settings.format_amount(5.0) == "5"
    assert settings.format_amount(-2.5) == "-2.5"


def test_environment_overrides_are_normalised(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POCKETLEDGER_LOG_LEVEL", "debug")
    monkeypatch.setenv("POCKETLEDGER_AMOUNT_FORMAT", ".2f")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.format_amount(5.0) == "5.00"
    assert get_settings() is settings


@pytest.mark.parametrize("field, value", [("log_level", "chatty"), ("amount_format", "q")])
def test_invalid_values_are_rejected(field: str, value: str) -> None:
    with pytest.raises(ValidationError):
        TrackerSettings(**{field: value})
