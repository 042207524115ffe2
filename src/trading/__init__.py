"""Normalized trading domain with exchange adapters."""

from src.trading.domain import Currency, CurrencyPair
from src.trading.enums import OrderStatus, OrderType

__all__ = ["Currency", "CurrencyPair", "OrderStatus", "OrderType"]
