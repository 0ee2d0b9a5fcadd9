from __future__ import annotations

import os
from decimal import Decimal

import pytest

from alphavantage_fetch.core.config import Config
from alphavantage_fetch.core.coordinator import AlphaVantage
from alphavantage_fetch.core.errors import ThrottleError, TransportError

pytestmark = pytest.mark.skipif(
    not os.getenv("ALPHAVANTAGE_API_KEY"), reason="ALPHAVANTAGE_API_KEY not set"
)


@pytest.fixture(scope="module")
def client():
    with AlphaVantage(Config.from_env()) as av:
        yield av


def _result_or_skip(future):
    try:
        return future.result(timeout=30)
    except (ThrottleError, TransportError) as exc:  # pragma: no cover - depends on live API
        pytest.skip(f"Alpha Vantage unavailable: {exc}")


@pytest.mark.network
@pytest.mark.integration
def test_daily_series_live(client) -> None:
    response = _result_or_skip(client.crypto().daily().for_symbol("BTC").market("USD").fetch())

    assert response.time_series
    unit = response.crypto_units[0]
    assert isinstance(unit.close, Decimal)
    assert response.meta_data["digital_currency_code"] == "BTC"
