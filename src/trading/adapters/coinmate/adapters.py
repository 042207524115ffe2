"""
Coinmate to domain adapters.

Pure functions translating parsed Coinmate responses into normalized trading
records. Nothing here performs I/O or keeps state between calls.

Two side classifiers coexist on purpose:
- type_to_order_type_or_none is lenient and yields None for unknown tokens;
  every public trade and account history path uses it.
- _strict_order_type raises UnknownOrderTypeError; open orders and order
  detail use it and a single bad row aborts the whole batch.
"""

import logging
from collections.abc import Sequence

from src.trading.adapters.coinmate.data import (
    CoinmateBalance,
    CoinmateOpenOrders,
    CoinmateOrderBook,
    CoinmateOrderBookEntry,
    CoinmateOrders,
    CoinmateTicker,
    CoinmateTradeHistory,
    CoinmateTransactionHistory,
    CoinmateTransactions,
    CoinmateTransactionsEntry,
)
from src.trading.adapters.coinmate.utils import (
    from_epoch_millis,
    from_epoch_seconds,
    get_pair,
)
from src.trading.config import config
from src.trading.domain.currency import Currency, CurrencyPair
from src.trading.enums import (
    FundingStatus,
    FundingType,
    OrderStatus,
    OrderType,
    SortDirection,
    TradeSortType,
)
from src.trading.errors import InvalidArgumentError, UnknownOrderTypeError
from src.trading.model.account import Balance, FundingRecord, Wallet
from src.trading.model.book import OrderBook
from src.trading.model.order import LimitOrder, MarketOrder, Order, StopOrder
from src.trading.model.ticker import Ticker
from src.trading.model.trade import Trade, Trades, UserTrade, UserTrades

logger = logging.getLogger(__name__)

_WITHDRAWAL_TYPES = frozenset({"WITHDRAWAL", "CREATE_VOUCHER"})
_DEPOSIT_TYPES = frozenset({"DEPOSIT", "USED_VOUCHER", "NEW_USER_REWARD", "REFERRAL"})

_COMPLETE_STATUSES = frozenset({"OK", "COMPLETED"})
_PROCESSING_STATUSES = frozenset({"NEW", "SENT", "CREATED", "WAITING", "PENDING"})

_ORDER_STATUSES = {
    "CANCELLED": OrderStatus.CANCELED,
    "FILLED": OrderStatus.FILLED,
    "PARTIALLY_FILLED": OrderStatus.PARTIALLY_FILLED,
    "OPEN": OrderStatus.NEW,
}


def _currency(code: str | None) -> Currency | None:
    if code is None:
        return None
    return Currency.of(code, config.known_currencies)


def _pair(token: str) -> CurrencyPair:
    return get_pair(token, config.known_currencies)


# =============================================================================
# SIDE CLASSIFIERS
# =============================================================================


def type_to_order_type_or_none(trade_type: str) -> OrderType | None:
    """
    Classify a Coinmate trade or transaction type as a side.

    BUY and QUICK_BUY are bids, SELL and QUICK_SELL are asks. Any other
    token (deposits, fees, vouchers...) has no side and yields None.
    """
    match trade_type:
        case "BUY" | "QUICK_BUY":
            return OrderType.BID
        case "SELL" | "QUICK_SELL":
            return OrderType.ASK
        case _:
            return None


def _strict_order_type(order_type: str) -> OrderType:
    """Classify an order side, raising for anything but BUY or SELL."""
    match order_type:
        case "BUY":
            return OrderType.BID
        case "SELL":
            return OrderType.ASK
        case _:
            logger.error(f"Unknown order type: {order_type!r}")
            raise UnknownOrderTypeError(
                "Unknown order type", details={"type": order_type}
            )


# =============================================================================
# MARKET DATA
# =============================================================================


def adapt_ticker(
    coinmate_ticker: CoinmateTicker, currency_pair: CurrencyPair
) -> Ticker:
    """
    Adapt a Coinmate ticker to a Ticker.

    Args:
        coinmate_ticker: The exchange specific ticker
        currency_pair: Market the ticker was requested for (e.g. BTC/EUR)

    Returns:
        The normalized ticker

    """
    coinmate_ticker.raise_for_error()

    data = coinmate_ticker.data
    return Ticker(
        currency_pair=currency_pair,
        last=data.last,
        bid=data.bid,
        ask=data.ask,
        high=data.high,
        low=data.low,
        volume=data.amount,
        open=data.open,
        percentage_change=data.change,
        timestamp=from_epoch_seconds(data.timestamp),
    )


def create_orders(
    entries: Sequence[CoinmateOrderBookEntry],
    order_type: OrderType,
    currency_pair: CurrencyPair,
) -> list[LimitOrder]:
    """Build one LimitOrder per order book level, without id or timestamp."""
    return [
        LimitOrder(
            type=order_type,
            original_amount=entry.amount,
            currency_pair=currency_pair,
            id=None,
            timestamp=None,
            limit_price=entry.price,
        )
        for entry in entries
    ]


def adapt_order_book(
    coinmate_order_book: CoinmateOrderBook, currency_pair: CurrencyPair
) -> OrderBook:
    """Adapt a Coinmate order book; the result carries no timestamp."""
    coinmate_order_book.raise_for_error()

    data = coinmate_order_book.data
    asks = create_orders(data.asks, OrderType.ASK, currency_pair)
    bids = create_orders(data.bids, OrderType.BID, currency_pair)
    return OrderBook(timestamp=None, asks=asks, bids=bids)


def adapt_trade(entry: CoinmateTransactionsEntry) -> Trade:
    """Adapt a single public transaction."""
    return Trade(
        type=type_to_order_type_or_none(entry.trade_type),
        original_amount=entry.amount,
        currency_pair=_pair(entry.currency_pair),
        price=entry.price,
        timestamp=from_epoch_millis(entry.timestamp),
        id=str(entry.transaction_id),
    )


def adapt_trades(
    coinmate_transactions: CoinmateTransactions,
    sort_type: TradeSortType | None = None,
) -> Trades:
    """
    Adapt public transactions.

    Coinmate does not document the ordering of this endpoint, so the sort
    tag is taken from the caller or from configuration (by id by default).
    """
    coinmate_transactions.raise_for_error()
    trades = [adapt_trade(entry) for entry in coinmate_transactions.data]
    return Trades(trades=trades, sort_type=sort_type or config.public_trades_sort)


# =============================================================================
# ACCOUNT
# =============================================================================


def adapt_wallet(coinmate_balance: CoinmateBalance) -> Wallet:
    """Adapt balances; every currency key becomes one Balance."""
    coinmate_balance.raise_for_error()
    balances = []
    for lc_currency, funds in coinmate_balance.data.items():
        balances.append(
            Balance(
                currency=Currency.of(lc_currency.upper(), config.known_currencies),
                total=funds.balance,
                available=funds.available,
                frozen=funds.reserved,
            )
        )
    return Wallet.from_balances(balances)


def adapt_transaction_history(history: CoinmateTransactionHistory) -> UserTrades:
    """
    Adapt the general account transaction history to user trades.

    Rows without a price currency (funding movements) get no pair, and
    non-trading transaction types get no side.
    """
    history.raise_for_error()
    trades = []
    for entry in history.data:
        currency_pair = None
        if entry.amount_currency and entry.price_currency:
            currency_pair = _pair(
                f"{entry.amount_currency}{config.pair_separator}{entry.price_currency}"
            )

        trades.append(
            UserTrade(
                type=type_to_order_type_or_none(entry.transaction_type),
                original_amount=entry.amount,
                currency_pair=currency_pair,
                price=entry.price,
                timestamp=from_epoch_millis(entry.timestamp),
                id=str(entry.transaction_id),
                order_id=str(entry.order_id) if entry.order_id is not None else None,
                fee_amount=entry.fee,
                fee_currency=_currency(entry.fee_currency),
            )
        )

    return UserTrades(trades=trades, sort_type=TradeSortType.SORT_BY_TIMESTAMP)


def adapt_trade_history(history: CoinmateTradeHistory) -> UserTrades:
    """
    Adapt the trade history to user trades.

    The endpoint does not name the fee currency; it is taken to be the
    counter currency of the traded pair.
    """
    history.raise_for_error()
    trades = []
    for entry in history.data:
        currency_pair = _pair(entry.currency_pair)
        trades.append(
            UserTrade(
                type=type_to_order_type_or_none(entry.type),
                original_amount=entry.amount,
                currency_pair=currency_pair,
                price=entry.price,
                timestamp=from_epoch_millis(entry.created_timestamp),
                id=str(entry.transaction_id),
                order_id=str(entry.order_id),
                fee_amount=entry.fee,
                fee_currency=currency_pair.counter,
            )
        )

    return UserTrades(trades=trades, sort_type=TradeSortType.SORT_BY_TIMESTAMP)


def _funding_status(status: str | None) -> FundingStatus:
    normalized = (status or "").upper()
    if normalized in _COMPLETE_STATUSES:
        return FundingStatus.COMPLETE
    if normalized in _PROCESSING_STATUSES:
        return FundingStatus.PROCESSING
    return FundingStatus.FAILED


def adapt_funding_history(history: CoinmateTransactionHistory) -> list[FundingRecord]:
    """
    Extract deposits and withdrawals from the account transaction history.

    Trading rows are skipped. For DEPOSIT rows Coinmate puts the transaction
    hash in the description as "<feeCurrency>: <hash>"; it becomes the
    external id.
    """
    history.raise_for_error()
    fundings = []

    for entry in history.data:
        if entry.transaction_type in _WITHDRAWAL_TYPES:
            funding_type = FundingType.WITHDRAWAL
        elif entry.transaction_type in _DEPOSIT_TYPES:
            funding_type = FundingType.DEPOSIT
        else:
            logger.debug(
                f"Skipping non-funding transaction {entry.transaction_id} "
                f"of type {entry.transaction_type}"
            )
            continue

        description = entry.description
        external_id = None
        if (
            entry.transaction_type == "DEPOSIT"
            and entry.fee_currency is not None
            and description is not None
        ):
            prefix = f"{entry.fee_currency}: "
            if description.startswith(prefix):
                external_id = description.removeprefix(prefix)

        fundings.append(
            FundingRecord(
                address=None,
                date=from_epoch_millis(entry.timestamp),
                currency=_currency(entry.amount_currency),
                amount=entry.amount,
                internal_id=str(entry.transaction_id),
                external_id=external_id,
                type=funding_type,
                status=_funding_status(entry.status),
                balance=None,
                fee=entry.fee,
                description=description,
            )
        )

    return fundings


# =============================================================================
# TRADING
# =============================================================================


def adapt_open_orders(coinmate_open_orders: CoinmateOpenOrders) -> list[LimitOrder]:
    """
    Adapt open orders to limit orders.

    Raises:
        UnknownOrderTypeError: If any order is neither BUY nor SELL

    """
    coinmate_open_orders.raise_for_error()
    orders = []
    for entry in coinmate_open_orders.data:
        orders.append(
            LimitOrder(
                type=_strict_order_type(entry.type),
                original_amount=entry.amount,
                currency_pair=_pair(entry.currency_pair),
                id=str(entry.id),
                timestamp=from_epoch_millis(entry.timestamp),
                limit_price=entry.price,
            )
        )
    return orders


def adapt_stop_orders(coinmate_open_orders: CoinmateOpenOrders) -> list[StopOrder]:
    """
    Adapt the LIMIT_STOP subset of open orders to stop orders.

    SELL is the ask side; every other type, known or not, is treated as a bid.
    """
    coinmate_open_orders.raise_for_error()
    orders = [
        StopOrder(
            type=OrderType.ASK if entry.type == "SELL" else OrderType.BID,
            original_amount=entry.amount,
            currency_pair=_pair(entry.currency_pair),
            id=str(entry.id),
            timestamp=from_epoch_millis(entry.timestamp),
            stop_price=entry.stop_price,
            limit_price=entry.price,
        )
        for entry in coinmate_open_orders.data
        if entry.order_trade_type == "LIMIT_STOP"
    ]
    logger.debug(
        f"Kept {len(orders)} stop orders of {len(coinmate_open_orders.data)} open"
    )
    return orders


def adapt_sort_order(order: SortDirection) -> str:
    """
    Format a sort direction for Coinmate history queries.

    Raises:
        InvalidArgumentError: If order is not a SortDirection

    """
    match order:
        case SortDirection.ASC:
            return "ASC"
        case SortDirection.DESC:
            return "DESC"
        case _:
            raise InvalidArgumentError(
                f"Unsupported sort direction: {order!r}", details={"order": order}
            )


def adapt_orders(coinmate_orders: CoinmateOrders) -> list[Order]:
    """
    Adapt an order detail response to a single-element list.

    The filled amount is derived as original minus remaining amount.

    Raises:
        UnknownOrderTypeError: If the order is neither BUY nor SELL

    """
    coinmate_orders.raise_for_error()

    entry = coinmate_orders.data

    order = MarketOrder(
        type=_strict_order_type(entry.type),
        original_amount=entry.original_amount,
        currency_pair=None,
        id=str(entry.id),
        timestamp=from_epoch_millis(entry.timestamp),
        average_price=entry.avg_price,
        cumulative_amount=entry.original_amount - entry.remaining_amount,
        fee=None,
        status=_ORDER_STATUSES.get(entry.status, OrderStatus.UNKNOWN),
    )
    return [order]
