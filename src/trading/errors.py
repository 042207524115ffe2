"""
Adapter error taxonomy.

Strict classification paths raise these errors; lenient ones never do.
"""

from __future__ import annotations

from typing import Any


class CoinmateError(Exception):
    """
    Base class for all adapter errors.

    Includes structured error info for logging and debugging.
    """

    error_code: str = "COINMATE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for logging."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class CoinmateApiError(CoinmateError):
    """The exchange flagged its response envelope as an error."""

    error_code = "API_ERROR"


class UnknownOrderTypeError(CoinmateError):
    """Order side token is neither BUY nor SELL."""

    error_code = "UNKNOWN_ORDER_TYPE"


class InvalidArgumentError(CoinmateError, ValueError):
    """Caller passed a value outside the accepted contract."""

    error_code = "INVALID_ARGUMENT"


class UnknownCurrencyError(InvalidArgumentError):
    """Currency code is not in the explicitly supplied known set."""

    error_code = "UNKNOWN_CURRENCY"
