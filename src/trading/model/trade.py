"""
Normalized trade models.

Trade represents a public market execution; UserTrade adds the account
specific fields (order id and fee). Collections carry a sort tag describing
the ordering the producer claims for them.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.trading.domain.currency import Currency, CurrencyPair
from src.trading.enums import OrderType, TradeSortType


class Trade(BaseModel):
    """
    Domain model for a public trade.

    The side is None when the exchange token could not be classified.
    """

    type: OrderType | None = Field(description="Aggressor side, if known")
    original_amount: Decimal | None = Field(description="Traded amount in base")
    currency_pair: CurrencyPair | None = Field(default=None)
    price: Decimal | None = Field(default=None)
    timestamp: datetime | None = Field(default=None)
    id: str | None = Field(default=None, description="Exchange trade identifier")

    model_config = ConfigDict(frozen=True)


class UserTrade(Trade):
    """A trade executed by the account owner."""

    order_id: str | None = Field(default=None)
    fee_amount: Decimal | None = Field(default=None)
    fee_currency: Currency | None = Field(default=None)


class Trades(BaseModel):
    """A collection of public trades with its sort tag."""

    trades: list[Trade] = Field(default_factory=list)
    sort_type: TradeSortType = TradeSortType.SORT_BY_ID

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        """Get the number of trades."""
        return len(self.trades)


class UserTrades(BaseModel):
    """A collection of account trades with its sort tag."""

    trades: list[UserTrade] = Field(default_factory=list)
    sort_type: TradeSortType = TradeSortType.SORT_BY_TIMESTAMP

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        """Get the number of trades."""
        return len(self.trades)
