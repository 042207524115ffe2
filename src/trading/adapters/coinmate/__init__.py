"""Coinmate REST response models and adapters."""

from src.trading.adapters.coinmate.adapters import (
    adapt_funding_history,
    adapt_open_orders,
    adapt_order_book,
    adapt_orders,
    adapt_sort_order,
    adapt_stop_orders,
    adapt_ticker,
    adapt_trade,
    adapt_trade_history,
    adapt_trades,
    adapt_transaction_history,
    adapt_wallet,
    create_orders,
    type_to_order_type_or_none,
)
from src.trading.adapters.coinmate.utils import get_pair, get_pair_string

__all__ = [
    "adapt_funding_history",
    "adapt_open_orders",
    "adapt_order_book",
    "adapt_orders",
    "adapt_sort_order",
    "adapt_stop_orders",
    "adapt_ticker",
    "adapt_trade",
    "adapt_trade_history",
    "adapt_trades",
    "adapt_transaction_history",
    "adapt_wallet",
    "create_orders",
    "get_pair",
    "get_pair_string",
    "type_to_order_type_or_none",
]
