"""Test normalized domain models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.trading.domain.currency import Currency, CurrencyPair
from src.trading.enums import OrderType
from src.trading.model.account import Balance, Wallet
from src.trading.model.order import LimitOrder, Order


class TestModels:
    """Test model behavior beyond plain field storage."""

    def test_models_are_frozen(self, btc_eur: CurrencyPair) -> None:
        """Normalized records cannot be mutated after construction."""
        order = LimitOrder(
            type=OrderType.BID,
            original_amount=Decimal("1"),
            currency_pair=btc_eur,
            limit_price=Decimal("100"),
        )

        with pytest.raises(ValidationError):
            order.limit_price = Decimal("200")  # type: ignore[misc]

    def test_remaining_amount_needs_both_amounts(self) -> None:
        """Remaining amount is unknown without a filled amount."""
        order = Order(type=OrderType.ASK, original_amount=Decimal("5"))

        assert order.remaining_amount is None

    def test_wallet_lookup_by_code_or_currency(self) -> None:
        """Balances can be looked up by Currency or code."""
        btc = Balance(currency=Currency.of("BTC"), total=Decimal("1"))
        wallet = Wallet.from_balances([btc])

        assert wallet.get_balance(Currency.of("btc")) == btc
        assert wallet.get_balance("btc") == btc
        assert wallet.get_balance("EUR") is None
