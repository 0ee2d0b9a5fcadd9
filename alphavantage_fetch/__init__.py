"""Fluent Alpha Vantage client.

This module exposes the public API: the entry point, configuration, request
descriptors, typed responses and the exception hierarchy.
"""

from .contracts.fetcher import FailureCallback, Fetcher, SuccessCallback
from .core.config import Config
from .core.coordinator import AlphaVantage
from .core.errors import (
    AlphaVantageError,
    ConfigurationError,
    RemoteApiError,
    RequestValidationError,
    ResponseDecodeError,
    ThrottleError,
    TransportError,
)
from .core.queries import (
    CryptoRequest,
    DigitalCurrencyRequest,
    DigitalCurrencyRequestBuilder,
    RatingRequest,
    RatingRequestBuilder,
)
from .core.url_extractor import extract, extract_params
from .cryptocurrency.client import (
    Crypto,
    DailyRequestProxy,
    MonthlyRequestProxy,
    RatingRequestProxy,
    WeeklyRequestProxy,
)
from .models.crypto import CryptoResponse, CryptoUnit, RatingResponse
from .models.shared import BASE_URL, Function

__all__ = [
    "AlphaVantage",
    "Config",
    "BASE_URL",
    "Function",
    "Fetcher",
    "SuccessCallback",
    "FailureCallback",
    "CryptoRequest",
    "DigitalCurrencyRequest",
    "DigitalCurrencyRequestBuilder",
    "RatingRequest",
    "RatingRequestBuilder",
    "extract",
    "extract_params",
    "Crypto",
    "DailyRequestProxy",
    "WeeklyRequestProxy",
    "MonthlyRequestProxy",
    "RatingRequestProxy",
    "CryptoResponse",
    "CryptoUnit",
    "RatingResponse",
    "AlphaVantageError",
    "ConfigurationError",
    "RequestValidationError",
    "TransportError",
    "RemoteApiError",
    "ThrottleError",
    "ResponseDecodeError",
]
