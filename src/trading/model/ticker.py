"""
Normalized ticker model.

This model represents a ticker snapshot in the domain layer, independent of
any specific exchange implementation.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.trading.domain.currency import CurrencyPair


class Ticker(BaseModel):
    """
    Domain model for a market ticker.

    Exchange-specific ticker formats are transformed into this model at the
    adapter boundary. All prices are kept as Decimal exactly as received.
    """

    currency_pair: CurrencyPair = Field(description="Market the ticker belongs to")
    last: Decimal | None = Field(default=None, description="Last traded price")
    bid: Decimal | None = Field(default=None, description="Best bid price")
    ask: Decimal | None = Field(default=None, description="Best ask price")
    high: Decimal | None = Field(default=None, description="24h high")
    low: Decimal | None = Field(default=None, description="24h low")
    volume: Decimal | None = Field(default=None, description="24h volume in base")
    open: Decimal | None = Field(default=None, description="24h opening price")
    percentage_change: Decimal | None = Field(
        default=None, description="24h change in percent"
    )
    timestamp: datetime | None = Field(default=None, description="Snapshot time")

    model_config = ConfigDict(frozen=True)
