"""Mini README: Centralised configuration models and helpers for dailyledger.

Structure:
    * DailyLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``DAILYLEDGER_`` environment variables
    (or a local ``.env`` file) for the starting daily limit and log level.
    The configuration is cached so validation runs once per process.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .expenses.records import MAX_AMOUNT


class DailyLedgerSettings(BaseSettings):
    """Runtime configuration for the expense tracker console."""

    model_config = SettingsConfigDict(
        env_prefix="DAILYLEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label used when reporting configuration.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level; WARNING keeps the interactive console quiet.",
    )
    default_daily_limit: Decimal = Field(
        Decimal("0"),
        description="Daily limit applied at start-up. Zero disables enforcement.",
        ge=0,
        le=MAX_AMOUNT,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> str:
        """Accept any casing but only standard logging level names."""

        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name


@lru_cache()
def get_settings() -> DailyLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DailyLedgerSettings()
