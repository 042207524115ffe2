"""
Coinmate REST API Pydantic Models.

This module implements Pydantic models that parse Coinmate REST responses.
Every response shares the same envelope ({"error", "errorMessage", "data"});
the payload models below describe the "data" part of each endpoint.

Key design principles:
- Payload models share one BaseModel subclass carrying the parsing config
- Field aliases are the Coinmate JSON keys, attributes are snake_case
- Monetary values are parsed to Decimal without passing through binary floats
- Unknown keys are ignored so API additions do not break parsing
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from src.trading.errors import CoinmateApiError


def _to_decimal(value: Any) -> Any:
    """Convert floats to Decimal through their shortest string form."""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


CoinmateDecimal = Annotated[Decimal, BeforeValidator(_to_decimal)]


class CoinmateBaseModel(BaseModel):
    """Base configuration shared by all Coinmate payload models."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class CoinmateBaseResponse(CoinmateBaseModel):
    """
    Response envelope common to every Coinmate endpoint.

    Subclasses narrow the type of ``data``.
    """

    error: bool = False
    error_message: str | None = Field(alias="errorMessage", default=None)
    data: Any = None

    @model_validator(mode="before")
    @classmethod
    def drop_null_data(cls, data: Any) -> Any:
        """Let a null payload (error responses) fall back to the default."""
        if isinstance(data, dict) and data.get("data", ...) is None:
            data = {k: v for k, v in data.items() if k != "data"}
        return data

    def raise_for_error(self) -> "CoinmateBaseResponse":
        """
        Raise if the exchange flagged this response as failed.

        Returns:
            The response itself, for chaining

        Raises:
            CoinmateApiError: If ``error`` is set or the payload is missing

        """
        if self.error:
            raise CoinmateApiError(
                self.error_message or "Coinmate returned an error",
                details={"error_message": self.error_message},
            )
        if self.data is None:
            raise CoinmateApiError("Coinmate returned an empty response")
        return self


# Market data
class CoinmateTickerData(CoinmateBaseModel):
    """Ticker snapshot; ``timestamp`` is in seconds since the epoch."""

    last: CoinmateDecimal | None = None
    high: CoinmateDecimal | None = None
    low: CoinmateDecimal | None = None
    amount: CoinmateDecimal | None = None
    bid: CoinmateDecimal | None = None
    ask: CoinmateDecimal | None = None
    change: CoinmateDecimal | None = None
    open: CoinmateDecimal | None = None
    timestamp: int


class CoinmateTicker(CoinmateBaseResponse):
    """Response of the ticker endpoint."""

    data: CoinmateTickerData | None = None


class CoinmateOrderBookEntry(CoinmateBaseModel):
    """Single aggregated order book level."""

    price: CoinmateDecimal
    amount: CoinmateDecimal


class CoinmateOrderBookData(CoinmateBaseModel):
    """Both sides of the order book."""

    asks: list[CoinmateOrderBookEntry] = Field(default_factory=list)
    bids: list[CoinmateOrderBookEntry] = Field(default_factory=list)


class CoinmateOrderBook(CoinmateBaseResponse):
    """Response of the order book endpoint."""

    data: CoinmateOrderBookData | None = None


class CoinmateTransactionsEntry(CoinmateBaseModel):
    """Public trade; ``timestamp`` is in milliseconds."""

    timestamp: int
    transaction_id: str | int = Field(alias="transactionId")
    price: CoinmateDecimal
    amount: CoinmateDecimal
    currency_pair: str = Field(alias="currencyPair")
    trade_type: str = Field(alias="tradeType")


class CoinmateTransactions(CoinmateBaseResponse):
    """Response of the public transactions endpoint."""

    data: list[CoinmateTransactionsEntry] = Field(default_factory=list)


# Account
class CoinmateBalanceEntry(CoinmateBaseModel):
    """Balance of one currency."""

    currency: str | None = None
    balance: CoinmateDecimal | None = None
    reserved: CoinmateDecimal | None = None
    available: CoinmateDecimal | None = None


class CoinmateBalance(CoinmateBaseResponse):
    """Response of the balances endpoint, keyed by lowercase currency code."""

    data: dict[str, CoinmateBalanceEntry] = Field(default_factory=dict)


class CoinmateTransactionHistoryEntry(CoinmateBaseModel):
    """
    Account transaction of any kind: trades, deposits, withdrawals, vouchers.

    Funding rows carry no price or price currency.
    """

    transaction_id: int = Field(alias="transactionId")
    timestamp: int
    transaction_type: str = Field(alias="transactionType")
    amount: CoinmateDecimal | None = None
    amount_currency: str | None = Field(alias="amountCurrency", default=None)
    price: CoinmateDecimal | None = None
    price_currency: str | None = Field(alias="priceCurrency", default=None)
    fee: CoinmateDecimal | None = None
    fee_currency: str | None = Field(alias="feeCurrency", default=None)
    description: str | None = None
    status: str | None = None
    order_id: int | None = Field(alias="orderId", default=None)


class CoinmateTransactionHistory(CoinmateBaseResponse):
    """Response of the transaction history endpoint."""

    data: list[CoinmateTransactionHistoryEntry] = Field(default_factory=list)


class CoinmateTradeHistoryEntry(CoinmateBaseModel):
    """Account trade; ``created_timestamp`` is in milliseconds."""

    transaction_id: int = Field(alias="transactionId")
    created_timestamp: int = Field(alias="createdTimestamp")
    currency_pair: str = Field(alias="currencyPair")
    type: str
    order_type: str | None = Field(alias="orderType", default=None)
    order_id: int = Field(alias="orderId")
    amount: CoinmateDecimal
    price: CoinmateDecimal
    fee: CoinmateDecimal | None = None
    fee_type: str | None = Field(alias="feeType", default=None)


class CoinmateTradeHistory(CoinmateBaseResponse):
    """Response of the trade history endpoint."""

    data: list[CoinmateTradeHistoryEntry] = Field(default_factory=list)


# Trading
class CoinmateOpenOrdersEntry(CoinmateBaseModel):
    """Open order; ``order_trade_type`` distinguishes LIMIT from LIMIT_STOP."""

    id: int
    timestamp: int
    type: str
    currency_pair: str = Field(alias="currencyPair")
    price: CoinmateDecimal | None = None
    amount: CoinmateDecimal
    stop_price: CoinmateDecimal | None = Field(alias="stopPrice", default=None)
    order_trade_type: str | None = Field(alias="orderTradeType", default=None)
    hidden: bool = False


class CoinmateOpenOrders(CoinmateBaseResponse):
    """Response of the open orders endpoint."""

    data: list[CoinmateOpenOrdersEntry] = Field(default_factory=list)


class CoinmateOrder(CoinmateBaseModel):
    """Detail of one order, open or closed."""

    id: int
    timestamp: int
    type: str
    price: CoinmateDecimal | None = None
    remaining_amount: CoinmateDecimal = Field(alias="remainingAmount")
    original_amount: CoinmateDecimal = Field(alias="originalAmount")
    status: str
    order_trade_type: str | None = Field(alias="orderTradeType", default=None)
    avg_price: CoinmateDecimal | None = Field(alias="avgPrice", default=None)
    stop_price: CoinmateDecimal | None = Field(alias="stopPrice", default=None)
    hidden: bool = False


class CoinmateOrders(CoinmateBaseResponse):
    """Response of the order-by-id endpoint; wraps exactly one order."""

    data: CoinmateOrder | None = None
