"""Mini README: Centralised configuration models and helpers for the ledger.

Structure:
    * LedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read the session's annual interest rate and
    logging level. Values come from ``LEDGERSIM_*`` environment variables or
    a local ``.env`` file and are validated once per process. The supported
    currency set is fixed in ``ledgersim.currency.codes`` and is not
    configurable.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Runtime configuration for a ledger session."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGERSIM_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label used to tell sessions apart in logs.",
    )
    annual_interest_rate: float = Field(
        0.05,
        description="Annual rate used by interest projections, as a fraction.",
        ge=0.0,
        le=1.0,
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level; log output goes to stderr.",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """Accept any standard logging level name regardless of casing."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown logging level: {value}")
        return normalised


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
