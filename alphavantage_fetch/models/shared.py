"""Shared domain models used across multiple API families."""

from __future__ import annotations

from enum import StrEnum

BASE_URL = "https://www.alphavantage.co/query"


class Function(StrEnum):
    """Remote API operations.

    The value doubles as the ``function`` query parameter, so new members only
    need to match the code documented by Alpha Vantage.
    """

    DIGITAL_CURRENCY_DAILY = "DIGITAL_CURRENCY_DAILY"
    DIGITAL_CURRENCY_WEEKLY = "DIGITAL_CURRENCY_WEEKLY"
    DIGITAL_CURRENCY_MONTHLY = "DIGITAL_CURRENCY_MONTHLY"
    CRYPTO_RATING = "CRYPTO_RATING"

    @property
    def is_digital_currency(self) -> bool:
        return self in _DIGITAL_CURRENCY_FUNCTIONS


_DIGITAL_CURRENCY_FUNCTIONS = frozenset(
    {
        Function.DIGITAL_CURRENCY_DAILY,
        Function.DIGITAL_CURRENCY_WEEKLY,
        Function.DIGITAL_CURRENCY_MONTHLY,
    }
)
