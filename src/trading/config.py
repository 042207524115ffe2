"""
Adapter configuration using Pydantic Settings.

This module provides environment-based configuration for the Coinmate
adapters with type validation and defaults.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.trading.enums import TradeSortType


class AdapterConfig(BaseSettings):
    """Coinmate adapter configuration."""

    model_config = SettingsConfigDict(env_prefix="COINMATE_")

    # Collection tagging
    public_trades_sort: TradeSortType = Field(
        default=TradeSortType.SORT_BY_ID,
        description="Sort tag attached to public trade collections",
    )

    # Pair tokens
    pair_separator: str = Field(
        default="_",
        min_length=1,
        max_length=1,
        description="Separator between base and counter in pair tokens",
    )

    # Currency validation
    known_currencies: frozenset[str] = Field(
        default_factory=frozenset,
        description="Accepted currency codes (empty = accept any)",
    )

    @field_validator("known_currencies")
    @classmethod
    def normalize_known_currencies(cls, v: frozenset[str]) -> frozenset[str]:
        """Store known codes uppercase, matching Currency codes."""
        return frozenset(code.strip().upper() for code in v)

    @classmethod
    def from_env(cls) -> "AdapterConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured AdapterConfig instance

        """
        return cls()


# Global config instance
config = AdapterConfig.from_env()
