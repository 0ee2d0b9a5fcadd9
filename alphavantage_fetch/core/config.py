"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..models.shared import BASE_URL

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_WORKERS = 4

ENV_API_KEY = "ALPHAVANTAGE_API_KEY"
ENV_BASE_URL = "ALPHAVANTAGE_BASE_URL"
ENV_TIMEOUT = "ALPHAVANTAGE_TIMEOUT"
ENV_MAX_WORKERS = "ALPHAVANTAGE_MAX_WORKERS"


def parse_float(value: str | None, default: float) -> float:
    if value is None or value.strip() == "":
        return default
    return float(value)


def parse_int(value: str | None, default: int) -> int:
    if value is None or value.strip() == "":
        return default
    return int(value)


@dataclass(frozen=True, slots=True)
class Config:
    """Connection settings shared by every API family.

    ``key`` may be ``None``; the check happens when a request is fetched so that
    a client can be constructed before the key is known.
    """

    key: str | None = None
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_workers <= 0:
            raise ValueError("max_workers must be a positive integer")

    @staticmethod
    def from_env() -> "Config":
        return Config(
            key=os.getenv(ENV_API_KEY) or None,
            base_url=os.getenv(ENV_BASE_URL) or BASE_URL,
            timeout=parse_float(os.getenv(ENV_TIMEOUT), DEFAULT_TIMEOUT),
            max_workers=parse_int(os.getenv(ENV_MAX_WORKERS), DEFAULT_MAX_WORKERS),
        )
