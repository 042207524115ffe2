"""
Trading Domain Layer.

Value objects shared by every normalized record. They carry no exchange
vocabulary and are safe to compare and hash.
"""

from src.trading.domain.currency import Currency, CurrencyPair

__all__ = [
    "Currency",
    "CurrencyPair",
]
