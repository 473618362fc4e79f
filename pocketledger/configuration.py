"""Mini README: Centralised configuration models and helpers for PocketLedger.

Structure:
    * TrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``POCKETLEDGER_``) controlling log verbosity and how the console renders
    amounts and prompts. The configuration is cached so validation happens
    once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerSettings(BaseSettings):
    """Runtime configuration for the finance tracker console."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label used to tag log output.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logger level. Kept quiet by default so logs do not interleave with the menu.",
    )
    amount_format: str = Field(
        "g",
        description="Format spec applied to amounts when the console renders them.",
    )
    date_hint: str = Field(
        "DD-MM-YYYY",
        description="Date layout suggested in the prompt. Dates are never parsed.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> str:
        """Upper-case the level and reject names the logging module does not know."""

        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @field_validator("amount_format")
    @classmethod
    def _check_amount_format(cls, value: str) -> str:
        """Ensure the format spec can render a float."""

        try:
            format(1.5, value)
        except ValueError as error:
            raise ValueError(f"Invalid amount format spec: {value!r}") from error
        return value

    def format_amount(self, amount: float) -> str:
        """Render an amount with the configured format spec."""

        return format(amount, self.amount_format)


@lru_cache()
def get_settings() -> TrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return TrackerSettings()
