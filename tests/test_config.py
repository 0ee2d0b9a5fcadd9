from __future__ import annotations

import pytest

from alphavantage_fetch.core.config import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT, Config
from alphavantage_fetch.core.coordinator import AlphaVantage
from alphavantage_fetch.cryptocurrency.client import Crypto
from alphavantage_fetch.models.shared import BASE_URL
from tests.stubs import StubSession


def test_from_env_reads_settings(monkeypatch):
    monkeypatch.setenv("ALPHAVANTAGE_API_KEY", "secret")
    monkeypatch.setenv("ALPHAVANTAGE_BASE_URL", "http://localhost:8080/query")
    monkeypatch.setenv("ALPHAVANTAGE_TIMEOUT", "2.5")
    monkeypatch.setenv("ALPHAVANTAGE_MAX_WORKERS", "8")

    config = Config.from_env()

    assert config == Config(key="secret", base_url="http://localhost:8080/query", timeout=2.5, max_workers=8)


def test_from_env_defaults(monkeypatch):
    for name in ("ALPHAVANTAGE_API_KEY", "ALPHAVANTAGE_BASE_URL", "ALPHAVANTAGE_TIMEOUT", "ALPHAVANTAGE_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)

    config = Config.from_env()

    assert config.key is None
    assert config.base_url == BASE_URL
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.max_workers == DEFAULT_MAX_WORKERS


@pytest.mark.parametrize("kwargs", [{"timeout": 0}, {"max_workers": 0}])
def test_invalid_settings_are_rejected(kwargs):
    with pytest.raises(ValueError):
        Config(key="demo", **kwargs)


def test_entry_point_caches_crypto_and_leaves_injected_session_open():
    session = StubSession()

    with AlphaVantage(Config(key="demo"), session=session) as client:
        crypto = client.crypto()
        assert isinstance(crypto, Crypto)
        assert client.crypto() is crypto

    assert session.closed is False
