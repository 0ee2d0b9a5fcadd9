from __future__ import annotations

import pytest

from alphavantage_fetch.core.errors import RequestValidationError
from alphavantage_fetch.core.queries import DigitalCurrencyRequest, RatingRequest
from alphavantage_fetch.core.url_extractor import extract, extract_params
from alphavantage_fetch.models.shared import Function


@pytest.mark.parametrize(
    "function",
    [
        Function.DIGITAL_CURRENCY_DAILY,
        Function.DIGITAL_CURRENCY_WEEKLY,
        Function.DIGITAL_CURRENCY_MONTHLY,
    ],
)
def test_digital_currency_fragment(function):
    request = DigitalCurrencyRequest(function, "ETH", "USD")

    fragment = extract(request)

    assert fragment == f"function={function.value}&symbol=ETH&market=USD&"
    assert extract(request) == fragment
    assert fragment.count("symbol=") == 1
    assert fragment.count("market=") == 1


def test_rating_fragment():
    fragment = extract(RatingRequest("BTC"))

    assert fragment == "function=CRYPTO_RATING&symbol=BTC&"


def test_fragment_never_contains_key():
    params = extract_params(DigitalCurrencyRequest(Function.DIGITAL_CURRENCY_DAILY, "BTC", "USD"))

    assert list(params) == ["function", "symbol", "market"]
    assert "apikey" not in params


def test_values_are_url_encoded():
    fragment = extract(RatingRequest("BTC&x=1"))

    assert fragment == "function=CRYPTO_RATING&symbol=BTC%26x%3D1&"


def test_missing_market_is_rejected():
    request = DigitalCurrencyRequest(Function.DIGITAL_CURRENCY_DAILY, "BTC")

    with pytest.raises(RequestValidationError, match="market"):
        extract(request)


@pytest.mark.parametrize("symbol", [None, "", "   "])
def test_missing_symbol_is_rejected(symbol):
    with pytest.raises(RequestValidationError, match="symbol"):
        extract(RatingRequest(symbol))
