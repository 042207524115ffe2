"""
Normalized order models.

Orders share a common base carrying side, amounts, identity and status.
LimitOrder, StopOrder and MarketOrder add the price fields that distinguish
them. Every model is frozen and built in a single constructor call.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.trading.domain.currency import CurrencyPair
from src.trading.enums import OrderStatus, OrderType


class Order(BaseModel):
    """
    Base domain model for an order.

    Fields an exchange does not report stay None; nothing is inferred.
    """

    type: OrderType | None = Field(description="Order side (BID or ASK)")
    original_amount: Decimal | None = Field(description="Ordered amount in base")
    currency_pair: CurrencyPair | None = Field(default=None)
    id: str | None = Field(default=None, description="Exchange order identifier")
    timestamp: datetime | None = Field(default=None)
    status: OrderStatus | None = Field(default=None)
    average_price: Decimal | None = Field(default=None)
    cumulative_amount: Decimal | None = Field(
        default=None, description="Amount filled so far"
    )
    fee: Decimal | None = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @property
    def remaining_amount(self) -> Decimal | None:
        """Amount still open, when both original and filled are known."""
        if self.original_amount is None or self.cumulative_amount is None:
            return None
        return self.original_amount - self.cumulative_amount


class LimitOrder(Order):
    """An order executing at a fixed price or better."""

    limit_price: Decimal | None = Field(default=None)


class StopOrder(Order):
    """An order that activates at stop_price and then executes at limit_price."""

    stop_price: Decimal | None = Field(default=None)
    limit_price: Decimal | None = Field(default=None)


class MarketOrder(Order):
    """An order executing at the prevailing market price."""
