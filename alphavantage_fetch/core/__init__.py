"""Core utilities for Alpha Vantage fetching."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "AlphaVantage",
    "Config",
    "HttpTransport",
    "DigitalCurrencyRequest",
    "DigitalCurrencyRequestBuilder",
    "RatingRequest",
    "RatingRequestBuilder",
    "extract",
    "extract_params",
    "AlphaVantageError",
    "ConfigurationError",
    "RequestValidationError",
    "TransportError",
    "RemoteApiError",
    "ThrottleError",
    "ResponseDecodeError",
]

_lazy_targets = {
    "AlphaVantage": ("coordinator", "AlphaVantage"),
    "Config": ("config", "Config"),
    "HttpTransport": ("transport", "HttpTransport"),
    "DigitalCurrencyRequest": ("queries", "DigitalCurrencyRequest"),
    "DigitalCurrencyRequestBuilder": ("queries", "DigitalCurrencyRequestBuilder"),
    "RatingRequest": ("queries", "RatingRequest"),
    "RatingRequestBuilder": ("queries", "RatingRequestBuilder"),
    "extract": ("url_extractor", "extract"),
    "extract_params": ("url_extractor", "extract_params"),
    "AlphaVantageError": ("errors", "AlphaVantageError"),
    "ConfigurationError": ("errors", "ConfigurationError"),
    "RequestValidationError": ("errors", "RequestValidationError"),
    "TransportError": ("errors", "TransportError"),
    "RemoteApiError": ("errors", "RemoteApiError"),
    "ThrottleError": ("errors", "ThrottleError"),
    "ResponseDecodeError": ("errors", "ResponseDecodeError"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:  # pragma: no cover - defensive
        raise AttributeError(f"module 'alphavantage_fetch.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
