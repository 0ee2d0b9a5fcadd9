"""Request descriptors and the builders that assemble them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from ..models.shared import Function


@dataclass(frozen=True, slots=True)
class DigitalCurrencyRequest:
    """Daily, weekly or monthly series for a digital currency in a market."""

    function: Function
    symbol: str | None = None
    market: str | None = None

    def __post_init__(self) -> None:
        function = Function(self.function)
        if not function.is_digital_currency:
            raise ValueError(f"{function} is not a digital currency function")
        object.__setattr__(self, "function", function)


@dataclass(frozen=True, slots=True)
class RatingRequest:
    """Health index (FCAS rating) for a digital currency."""

    function: ClassVar[Function] = Function.CRYPTO_RATING
    symbol: str | None = None


CryptoRequest: TypeAlias = DigitalCurrencyRequest | RatingRequest


class DigitalCurrencyRequestBuilder:
    """Accumulates fields for a :class:`DigitalCurrencyRequest`.

    Field presence is not checked here; missing values surface when the request
    is turned into query parameters.
    """

    def __init__(self, function: Function = Function.DIGITAL_CURRENCY_DAILY) -> None:
        self._function = function
        self._symbol: str | None = None
        self._market: str | None = None

    def symbol(self, symbol: str) -> "DigitalCurrencyRequestBuilder":
        self._symbol = symbol
        return self

    def market(self, market: str) -> "DigitalCurrencyRequestBuilder":
        self._market = market
        return self

    def build(self) -> DigitalCurrencyRequest:
        return DigitalCurrencyRequest(function=self._function, symbol=self._symbol, market=self._market)


class RatingRequestBuilder:
    """Accumulates fields for a :class:`RatingRequest`."""

    def __init__(self) -> None:
        self._symbol: str | None = None

    def symbol(self, symbol: str) -> "RatingRequestBuilder":
        self._symbol = symbol
        return self

    def build(self) -> RatingRequest:
        return RatingRequest(symbol=self._symbol)
