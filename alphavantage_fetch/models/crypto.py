"""Typed responses for the digital currency and crypto rating endpoints.

Both responses are projected from the loosely typed mapping produced by the
JSON decoder. The projection is strict: a payload whose shape does not match,
or whose numeric columns cannot be parsed, raises
:class:`~alphavantage_fetch.core.errors.ResponseDecodeError` instead of
dropping data.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Mapping

from ..core.errors import ResponseDecodeError

ERROR_MESSAGE_KEY = "Error Message"
# Alpha Vantage answers HTTP 200 with one of these when a call is throttled.
THROTTLE_KEYS = ("Note", "Information")

META_DATA_KEY = "Meta Data"
TIME_SERIES_KEYS = (
    "Time Series (Digital Currency Daily)",
    "Time Series (Digital Currency Weekly)",
    "Time Series (Digital Currency Monthly)",
)
RATING_KEY = "Crypto Rating (FCAS)"

_ORDINAL_PREFIX = re.compile(r"^\s*\d+[a-z]?\.\s*")
_CURRENCY_SUFFIX = re.compile(r"^(?P<name>.*?)\s*\((?P<currency>[^)]+)\)\s*$")

_PRICE_FIELDS = ("open", "high", "low", "close")


def _strip_ordinal(label: str) -> str:
    """``"6. Last Refreshed"`` -> ``"Last Refreshed"``."""

    return _ORDINAL_PREFIX.sub("", label).strip()


def _normalise_key(label: str) -> str:
    return _strip_ordinal(label).lower().replace(" ", "_")


def _split_currency(label: str) -> tuple[str, str | None]:
    name = _strip_ordinal(label).lower()
    match = _CURRENCY_SUFFIX.match(name)
    if match is None:
        return name, None
    return match.group("name").strip(), match.group("currency").strip().upper()


def _to_decimal(value: Any, *, where: str) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ResponseDecodeError(f"Expected a numeric string at {where}, got {value!r}")
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ResponseDecodeError(f"Unparseable number {value!r} at {where}") from exc
    if not result.is_finite():
        raise ResponseDecodeError(f"Non-finite number {value!r} at {where}")
    return result


def _to_int(value: Any, *, where: str) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise ResponseDecodeError(f"Unparseable integer {value!r} at {where}") from exc


def _require_mapping(value: Any, *, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ResponseDecodeError(f"Expected an object at {where}, got {type(value).__name__}")
    return value


def find_error(data: Mapping[str, Any]) -> tuple[str, bool] | None:
    """Return ``(message, throttled)`` when the payload reports a problem."""

    message = data.get(ERROR_MESSAGE_KEY)
    if isinstance(message, str) and message.strip():
        return message.strip(), False
    for key in THROTTLE_KEYS:
        note = data.get(key)
        if isinstance(note, str) and note.strip():
            return note.strip(), True
    return None


@dataclass(frozen=True, slots=True)
class CryptoUnit:
    """One OHLCV row of a digital currency series.

    ``open``/``high``/``low``/``close`` are quoted in the requested market. The
    ``*_usd`` columns and ``market_cap`` are only filled by payloads that carry
    the additional USD quotes.
    """

    date: str
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal
    open_usd: Decimal | None = None
    high_usd: Decimal | None = None
    low_usd: Decimal | None = None
    close_usd: Decimal | None = None
    market_cap: Decimal | None = None

    @classmethod
    def of(cls, date: str, raw: Any, market: str | None) -> "CryptoUnit":
        entry = _require_mapping(raw, where=f"time series entry {date}")
        market_code = (market or "").upper()
        values: dict[str, Decimal] = {}
        for label, value in entry.items():
            name, currency = _split_currency(label)
            where = f"{date} / {label!r}"
            if name in _PRICE_FIELDS:
                if currency is None or currency == market_code:
                    values.setdefault(name, _to_decimal(value, where=where))
                if currency == "USD":
                    values.setdefault(f"{name}_usd", _to_decimal(value, where=where))
            elif name == "volume":
                values.setdefault("volume", _to_decimal(value, where=where))
            elif name == "market cap":
                values.setdefault("market_cap", _to_decimal(value, where=where))

        missing = [name for name in (*_PRICE_FIELDS, "volume") if name not in values]
        if missing:
            raise ResponseDecodeError(
                f"Time series entry {date} is missing field(s): {', '.join(missing)}"
            )
        return cls(date=date, **values)


@dataclass(frozen=True, slots=True)
class CryptoResponse:
    """Digital currency series for one symbol/market pair."""

    market: str | None
    meta_data: Mapping[str, str] = field(default_factory=dict)
    time_series: Mapping[str, CryptoUnit] = field(default_factory=dict)
    error_message: str | None = None
    throttled: bool = False

    @classmethod
    def of(cls, data: Mapping[str, Any], market: str | None) -> "CryptoResponse":
        """Project a decoded payload into a response.

        Daily, weekly and monthly payloads only differ in the name of the series
        key, so all three land in the same shape. Dates keep the order in which
        the API returned them.
        """

        data = _require_mapping(data, where="top level")
        error = find_error(data)
        if error is not None:
            message, throttled = error
            return cls(market=market, error_message=message, throttled=throttled)

        raw_meta = _require_mapping(data.get(META_DATA_KEY), where=repr(META_DATA_KEY))
        meta_data = {_normalise_key(key): str(value) for key, value in raw_meta.items()}

        series_key = next((key for key in TIME_SERIES_KEYS if key in data), None)
        if series_key is None:
            raise ResponseDecodeError(
                f"Payload carries no digital currency time series (keys: {sorted(data)})"
            )
        raw_series = _require_mapping(data[series_key], where=repr(series_key))
        units = {date: CryptoUnit.of(date, raw, market) for date, raw in raw_series.items()}

        return cls(
            market=market,
            meta_data=MappingProxyType(meta_data),
            time_series=MappingProxyType(units),
        )

    @property
    def crypto_units(self) -> list[CryptoUnit]:
        return list(self.time_series.values())


@dataclass(frozen=True, slots=True)
class RatingResponse:
    """Fundamental Crypto Asset Score (health index) for one symbol."""

    symbol: str | None = None
    name: str | None = None
    rating: str | None = None
    fcas_score: int | None = None
    developer_score: int | None = None
    market_maturity_score: int | None = None
    utility_score: int | None = None
    last_refreshed: str | None = None
    time_zone: str | None = None
    error_message: str | None = None
    throttled: bool = False

    @classmethod
    def of(cls, data: Mapping[str, Any]) -> "RatingResponse":
        data = _require_mapping(data, where="top level")
        error = find_error(data)
        if error is not None:
            message, throttled = error
            return cls(error_message=message, throttled=throttled)

        raw = _require_mapping(data.get(RATING_KEY), where=repr(RATING_KEY))
        record = {_normalise_key(key): value for key, value in raw.items()}

        def text(key: str) -> str | None:
            value = record.get(key)
            return None if value is None else str(value)

        return cls(
            symbol=text("symbol"),
            name=text("name"),
            rating=text("fcas_rating") or text("rating"),
            fcas_score=_to_int(record.get("fcas_score"), where="fcas score"),
            developer_score=_to_int(record.get("developer_score"), where="developer score"),
            market_maturity_score=_to_int(
                record.get("market_maturity_score"), where="market maturity score"
            ),
            utility_score=_to_int(record.get("utility_score"), where="utility score"),
            last_refreshed=text("last_refreshed"),
            time_zone=text("timezone") or text("time_zone"),
        )
