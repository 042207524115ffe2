"""
Normalized account models: balances, wallets and funding movements.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.trading.domain.currency import Currency
from src.trading.enums import FundingStatus, FundingType


class Balance(BaseModel):
    """Holdings of one currency."""

    currency: Currency
    total: Decimal | None = Field(default=None, description="Overall balance")
    available: Decimal | None = Field(default=None, description="Free to trade")
    frozen: Decimal | None = Field(default=None, description="Reserved in orders")

    model_config = ConfigDict(frozen=True)


class Wallet(BaseModel):
    """
    All balances of an account, keyed by currency code.

    Built from a list of balances via from_balances.
    """

    balances: dict[str, Balance] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_balances(cls, balances: list[Balance]) -> "Wallet":
        """Create a wallet indexing the given balances by currency code."""
        return cls(balances={b.currency.code: b for b in balances})

    def get_balance(self, currency: Currency | str) -> Balance | None:
        """Get the balance of a currency, if held."""
        code = currency.code if isinstance(currency, Currency) else currency.upper()
        return self.balances.get(code)


class FundingRecord(BaseModel):
    """
    A deposit or withdrawal movement.

    internal_id is the exchange transaction id; external_id is the on-chain
    reference when the exchange supplies one.
    """

    address: str | None = None
    date: datetime | None = None
    currency: Currency | None = None
    amount: Decimal | None = None
    internal_id: str | None = None
    external_id: str | None = None
    type: FundingType
    status: FundingStatus
    balance: Decimal | None = None
    fee: Decimal | None = None
    description: str | None = None

    model_config = ConfigDict(frozen=True)
