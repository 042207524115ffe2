"""Test helpers for Coinmate adapter tests."""

import json
from pathlib import Path
from typing import Any

from src.trading.adapters.coinmate.data import (
    CoinmateOpenOrders,
    CoinmateOrders,
    CoinmateTransactionHistory,
)


def load_fixture(filename: str) -> dict[str, Any]:
    """
    Load a JSON fixture file.

    Args:
        filename: Relative path from fixtures directory

    Returns:
        Parsed JSON data

    Example:
        ticker_data = load_fixture("coinmate/ticker_btc_eur.json")
    """
    fixtures_dir = Path(__file__).parent.parent.parent / "fixtures"
    fixture_path = fixtures_dir / filename

    with fixture_path.open() as f:
        data: dict[str, Any] = json.load(f)
        return data


def envelope(data: Any) -> dict[str, Any]:
    """Wrap a payload in the Coinmate response envelope."""
    return {"error": False, "errorMessage": None, "data": data}


class HistoryEntryBuilder:
    """Builder for transaction history rows."""

    def __init__(self) -> None:
        """Initialize with a completed BTC deposit."""
        self._data: dict[str, Any] = {
            "transactionId": 1,
            "timestamp": 1696161000000,
            "transactionType": "DEPOSIT",
            "amount": "0.5",
            "amountCurrency": "BTC",
            "price": None,
            "priceCurrency": None,
            "fee": "0",
            "feeCurrency": "BTC",
            "description": None,
            "status": "OK",
            "orderId": None,
        }

    def with_id(self, transaction_id: int) -> "HistoryEntryBuilder":
        """Set the transaction ID."""
        self._data["transactionId"] = transaction_id
        return self

    def with_type(self, transaction_type: str) -> "HistoryEntryBuilder":
        """Set the transaction type."""
        self._data["transactionType"] = transaction_type
        return self

    def with_status(self, status: str | None) -> "HistoryEntryBuilder":
        """Set the status."""
        self._data["status"] = status
        return self

    def with_description(self, description: str | None) -> "HistoryEntryBuilder":
        """Set the free-text description."""
        self._data["description"] = description
        return self

    def with_fee_currency(self, currency: str | None) -> "HistoryEntryBuilder":
        """Set the fee currency."""
        self._data["feeCurrency"] = currency
        return self

    def with_trade(
        self, price: str, price_currency: str, order_id: int
    ) -> "HistoryEntryBuilder":
        """Turn the row into a trade priced in price_currency."""
        self._data["price"] = price
        self._data["priceCurrency"] = price_currency
        self._data["orderId"] = order_id
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        return dict(self._data)


def build_history(*entries: HistoryEntryBuilder) -> CoinmateTransactionHistory:
    """Build a transaction history response from row builders."""
    return CoinmateTransactionHistory.model_validate(
        envelope([entry.build_json() for entry in entries])
    )


class OpenOrderBuilder:
    """Builder for open order rows."""

    def __init__(self) -> None:
        """Initialize with a plain BTC_EUR limit buy."""
        self._data: dict[str, Any] = {
            "id": 1,
            "timestamp": 1696161000000,
            "type": "BUY",
            "currencyPair": "BTC_EUR",
            "price": "25000",
            "amount": "0.1",
            "stopPrice": None,
            "orderTradeType": "LIMIT",
            "hidden": False,
        }

    def with_id(self, order_id: int) -> "OpenOrderBuilder":
        """Set the order ID."""
        self._data["id"] = order_id
        return self

    def with_type(self, order_type: str) -> "OpenOrderBuilder":
        """Set the order side token."""
        self._data["type"] = order_type
        return self

    def with_stop(self, stop_price: str) -> "OpenOrderBuilder":
        """Make this a LIMIT_STOP order with the given trigger."""
        self._data["orderTradeType"] = "LIMIT_STOP"
        self._data["stopPrice"] = stop_price
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        return dict(self._data)


def build_open_orders(*entries: OpenOrderBuilder) -> CoinmateOpenOrders:
    """Build an open orders response from row builders."""
    return CoinmateOpenOrders.model_validate(
        envelope([entry.build_json() for entry in entries])
    )


def build_order(
    type: str = "BUY",
    status: str = "OPEN",
    original_amount: str = "10",
    remaining_amount: str = "3",
) -> CoinmateOrders:
    """Build an order detail response."""
    return CoinmateOrders.model_validate(
        envelope(
            {
                "id": 42,
                "timestamp": 1696160000000,
                "type": type,
                "price": "25500",
                "remainingAmount": remaining_amount,
                "originalAmount": original_amount,
                "status": status,
                "orderTradeType": "LIMIT",
                "avgPrice": "25498.5",
            }
        )
    )
