"""Cryptocurrency API family."""

from .client import (
    Crypto,
    DailyRequestProxy,
    MonthlyRequestProxy,
    RatingRequestProxy,
    RequestProxy,
    WeeklyRequestProxy,
    parse_response,
)

__all__ = [
    "Crypto",
    "DailyRequestProxy",
    "MonthlyRequestProxy",
    "RatingRequestProxy",
    "RequestProxy",
    "WeeklyRequestProxy",
    "parse_response",
]
