"""Domain models for Alpha Vantage responses."""

from .crypto import CryptoResponse, CryptoUnit, RatingResponse
from .shared import BASE_URL, Function

__all__ = [
    "BASE_URL",
    "Function",
    "CryptoResponse",
    "CryptoUnit",
    "RatingResponse",
]
