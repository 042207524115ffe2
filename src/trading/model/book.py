"""
Normalized order book model.

Each side is a list of LimitOrder levels in the order the exchange reported
them. Levels carry no id or timestamp.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.trading.model.order import LimitOrder


class OrderBook(BaseModel):
    """
    Order book snapshot.

    Designed to be created fresh for each response; it is never mutated.
    """

    timestamp: datetime | None = None
    asks: list[LimitOrder] = Field(default_factory=list)
    bids: list[LimitOrder] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
