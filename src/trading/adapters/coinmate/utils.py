"""
Coinmate token helpers.

Coinmate identifies markets with tokens like ``BTC_EUR`` and reports times
as integer seconds or milliseconds since the epoch.
"""

from collections.abc import Collection
from datetime import UTC, datetime, timedelta

from src.trading.config import config
from src.trading.domain.currency import CurrencyPair
from src.trading.errors import InvalidArgumentError

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def get_pair(token: str, known_codes: Collection[str] | None = None) -> CurrencyPair:
    """
    Parse a Coinmate pair token into a CurrencyPair.

    Args:
        token: Pair token such as "BTC_EUR" (any case)
        known_codes: Optional set of accepted currency codes

    Raises:
        InvalidArgumentError: If the token is not BASE_COUNTER

    """
    parts = token.split(config.pair_separator)
    if len(parts) != 2 or not all(parts):
        raise InvalidArgumentError(
            f"Invalid currency pair token: {token!r}", details={"token": token}
        )
    base, counter = parts
    return CurrencyPair.of(base, counter, known_codes)


def get_pair_string(pair: CurrencyPair) -> str:
    """Format a CurrencyPair as a Coinmate pair token (e.g. "BTC_EUR")."""
    return f"{pair.base.code}{config.pair_separator}{pair.counter.code}"


def from_epoch_millis(millis: int) -> datetime:
    """Convert integer milliseconds since the epoch to an aware UTC datetime."""
    return _EPOCH + timedelta(milliseconds=millis)


def from_epoch_seconds(seconds: int) -> datetime:
    """Convert integer seconds since the epoch to an aware UTC datetime."""
    return from_epoch_millis(seconds * 1000)
