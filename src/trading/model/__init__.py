"""Normalized trading models."""

from src.trading.model.account import Balance, FundingRecord, Wallet
from src.trading.model.book import OrderBook
from src.trading.model.order import LimitOrder, MarketOrder, Order, StopOrder
from src.trading.model.ticker import Ticker
from src.trading.model.trade import Trade, Trades, UserTrade, UserTrades

__all__ = [
    "Balance",
    "FundingRecord",
    "LimitOrder",
    "MarketOrder",
    "Order",
    "OrderBook",
    "StopOrder",
    "Ticker",
    "Trade",
    "Trades",
    "UserTrade",
    "UserTrades",
    "Wallet",
]
