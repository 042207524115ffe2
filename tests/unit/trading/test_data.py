"""Test parsing of Coinmate responses into DTOs."""

from decimal import Decimal

import pytest

from src.trading.adapters.coinmate.data import (
    CoinmateBalance,
    CoinmateOrderBook,
    CoinmateOrders,
    CoinmateTicker,
    CoinmateTransactionHistory,
    CoinmateTransactions,
)
from src.trading.errors import CoinmateApiError, CoinmateError
from tests.unit.trading.helpers import envelope, load_fixture


class TestResponseParsing:
    """Verify fixture responses parse into typed models."""

    def test_can_parse_ticker(self) -> None:
        """Ticker values become exact Decimals."""
        # Given: A ticker response with JSON numbers
        ticker = CoinmateTicker.model_validate(
            load_fixture("coinmate/ticker_btc_eur.json")
        )

        # Then: Floats did not leak binary rounding into Decimals
        assert ticker.data.last == Decimal("25613.9")
        assert ticker.data.amount == Decimal("12.08436711")
        assert ticker.data.change == Decimal("-1.27")
        assert ticker.data.timestamp == 1696161600

    def test_can_parse_order_book(self) -> None:
        """Both sides of the book are parsed in order."""
        book = CoinmateOrderBook.model_validate(
            load_fixture("coinmate/order_book_btc_eur.json")
        )

        assert len(book.data.asks) == 3
        assert len(book.data.bids) == 2
        assert book.data.asks[2].amount == Decimal("1.20000001")

    def test_can_parse_json_string(self) -> None:
        """Raw JSON text parses the same way as a dict."""
        # Given: A raw JSON body
        body = (
            '{"error": false, "errorMessage": null, "data": [{"timestamp": 1, '
            '"transactionId": 7, "price": 0.1, "amount": 0.3, '
            '"currencyPair": "LTC_BTC", "tradeType": "SELL"}]}'
        )

        # When: We parse it
        transactions = CoinmateTransactions.model_validate_json(body)

        # Then: Decimal precision survives JSON number parsing
        entry = transactions.data[0]
        assert entry.price == Decimal("0.1")
        assert entry.amount == Decimal("0.3")
        assert entry.transaction_id == 7

    def test_balance_keys_are_lowercase_codes(self) -> None:
        """Balances are keyed by lowercase currency code."""
        balance = CoinmateBalance.model_validate(load_fixture("coinmate/balances.json"))

        assert set(balance.data) == {"btc", "eur", "ltc"}
        assert balance.data["btc"].reserved == Decimal("0.5")

    def test_history_funding_rows_have_no_price(self) -> None:
        """Deposits carry no price, price currency or order id."""
        history = CoinmateTransactionHistory.model_validate(
            load_fixture("coinmate/transaction_history.json")
        )

        deposit = history.data[1]
        assert deposit.transaction_type == "DEPOSIT"
        assert deposit.price is None
        assert deposit.price_currency is None
        assert deposit.order_id is None

    def test_unknown_keys_are_ignored(self) -> None:
        """API additions do not break parsing."""
        payload = load_fixture("coinmate/order.json")
        payload["data"]["someFutureField"] = "x"

        orders = CoinmateOrders.model_validate(payload)

        assert orders.data.id == 88001


class TestErrorEnvelope:
    """Test the error flag of the response envelope."""

    def test_raise_for_error_returns_ok_response(self) -> None:
        """A successful response is returned unchanged."""
        ticker = CoinmateTicker.model_validate(
            load_fixture("coinmate/ticker_btc_eur.json")
        )

        assert ticker.raise_for_error() is ticker

    def test_raise_for_error_raises_with_message(self) -> None:
        """A flagged response raises with the exchange message."""
        # Given: An error response
        response = CoinmateTransactions.model_validate(
            {"error": True, "errorMessage": "Access denied.", "data": None}
        )

        # When/Then: Checking it raises
        with pytest.raises(CoinmateApiError, match="Access denied.") as exc_info:
            response.raise_for_error()

        assert isinstance(exc_info.value, CoinmateError)
        assert exc_info.value.to_dict()["error_code"] == "API_ERROR"

    def test_empty_envelope_data_defaults(self) -> None:
        """List payloads default to empty."""
        response = CoinmateTransactions.model_validate(envelope([]))

        assert response.data == []
        assert response.error is False
