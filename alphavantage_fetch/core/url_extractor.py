"""Translate request descriptors into query parameters.

Neither the base URL nor the API key is handled here; the fetcher appends both
so that the mapping stays independent of transport and secrets.
"""

from __future__ import annotations

from urllib.parse import urlencode

from .errors import RequestValidationError
from .queries import CryptoRequest, DigitalCurrencyRequest, RatingRequest


def _required(value: str | None, *, name: str, request: CryptoRequest) -> str:
    if value is None or not str(value).strip():
        raise RequestValidationError(f"{request.function} request requires a {name}")
    return str(value).strip()


def extract_params(request: CryptoRequest) -> dict[str, str]:
    """Return the ordered query parameters for ``request``."""

    if isinstance(request, DigitalCurrencyRequest):
        return {
            "function": request.function.value,
            "symbol": _required(request.symbol, name="symbol", request=request),
            "market": _required(request.market, name="market", request=request),
        }
    if isinstance(request, RatingRequest):
        return {
            "function": request.function.value,
            "symbol": _required(request.symbol, name="symbol", request=request),
        }
    raise TypeError(f"Unsupported request type {type(request).__name__}")


def extract(request: CryptoRequest) -> str:
    """Return the query fragment, terminated by ``&`` so a key can follow."""

    return urlencode(extract_params(request)) + "&"
