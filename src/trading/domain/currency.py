"""
Currency value objects.

Currencies are plain immutable values identified by their uppercase code.
There is no global registry: when validation is wanted, callers pass the set
of accepted codes explicitly.
"""

from __future__ import annotations

from collections.abc import Collection

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.trading.errors import UnknownCurrencyError


class Currency(BaseModel):
    """A currency identified by its code (e.g. 'BTC', 'EUR')."""

    code: str = Field(min_length=1, description="Uppercase currency code")

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        """Store codes uppercase."""
        return v.upper()

    @classmethod
    def of(cls, code: str, known_codes: Collection[str] | None = None) -> Currency:
        """
        Normalize a currency code into a Currency.

        Args:
            code: Currency code in any case
            known_codes: Optional set of accepted uppercase codes; empty or
                None disables validation

        Raises:
            UnknownCurrencyError: If known_codes is given and lacks the code

        """
        currency = cls(code=code)
        if known_codes and currency.code not in known_codes:
            raise UnknownCurrencyError(
                f"Unknown currency: {currency.code}",
                details={"code": currency.code},
            )
        return currency

    def __str__(self) -> str:
        return self.code


class CurrencyPair(BaseModel):
    """
    A market identified by its base and counter currency.

    Prices in this market are quoted in the counter currency per one unit
    of the base currency.
    """

    base: Currency
    counter: Currency

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(
        cls, base: str, counter: str, known_codes: Collection[str] | None = None
    ) -> CurrencyPair:
        """Build a pair from two currency codes."""
        return cls(
            base=Currency.of(base, known_codes),
            counter=Currency.of(counter, known_codes),
        )

    def __str__(self) -> str:
        return f"{self.base}/{self.counter}"
