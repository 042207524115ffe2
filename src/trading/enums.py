"""
Enums for the normalized trading domain.

This module defines the standardized enum values shared by every normalized
record. Exchange adapters translate their own string tokens into these values
at the adapter boundary, so downstream consumers never see exchange vocabulary.

"""

from __future__ import annotations

import enum

# =============================================================================
# ORDER ENUMS
# =============================================================================


class OrderType(str, enum.Enum):
    """
    Side of an order or trade.

    BID is the buy side, ASK is the sell side.
    """

    BID = "bid"  # Buying the base currency
    ASK = "ask"  # Selling the base currency


class OrderStatus(str, enum.Enum):
    """
    Lifecycle status of an order as reported by an exchange.

    UNKNOWN is used when the exchange reports a status we do not recognize.
    """

    NEW = "new"
    PARTIALLY_FILLED = "partially_filled"
    FILLED = "filled"
    CANCELED = "canceled"
    UNKNOWN = "unknown"


# =============================================================================
# FUNDING ENUMS
# =============================================================================


class FundingType(str, enum.Enum):
    """Direction of a funding movement."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class FundingStatus(str, enum.Enum):
    """
    Processing status of a funding movement.

    FAILED doubles as the fallback for statuses an exchange reports that
    do not map to the other two.
    """

    COMPLETE = "complete"
    PROCESSING = "processing"
    FAILED = "failed"


# =============================================================================
# SORTING ENUMS
# =============================================================================


class TradeSortType(str, enum.Enum):
    """Ordering guarantee attached to a trade collection."""

    SORT_BY_ID = "sort_by_id"
    SORT_BY_TIMESTAMP = "sort_by_timestamp"


class SortDirection(str, enum.Enum):
    """Requested ordering direction for history queries."""

    ASC = "asc"
    DESC = "desc"
