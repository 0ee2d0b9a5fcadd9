"""High-level entry point handing out API family fetchers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from .config import Config
from .transport import HttpTransport

if TYPE_CHECKING:
    from ..cryptocurrency.client import Crypto


class AlphaVantage:
    """Entry point consumed by SDK/CLI callers.

    One instance owns a single transport (session plus worker pool) shared by
    every fetcher it hands out.
    """

    def __init__(self, config: Config, *, session: requests.Session | None = None) -> None:
        self._config = config
        self._transport = HttpTransport(
            session=session,
            timeout=config.timeout,
            max_workers=config.max_workers,
        )
        self._crypto: Crypto | None = None

    @property
    def config(self) -> Config:
        return self._config

    def crypto(self) -> "Crypto":
        """Return the cryptocurrency fetcher bound to this client."""

        if self._crypto is None:
            from ..cryptocurrency.client import Crypto

            self._crypto = Crypto(self._config, transport=self._transport)
        return self._crypto

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "AlphaVantage":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
