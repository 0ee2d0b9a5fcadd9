"""Protocols shared by every API family fetcher."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Callable, Protocol, TypeVar, runtime_checkable

from ..core.errors import AlphaVantageError

ResponseT = TypeVar("ResponseT")
ResponseT_co = TypeVar("ResponseT_co", covariant=True)

SuccessCallback = Callable[[ResponseT], None]
FailureCallback = Callable[[AlphaVantageError], None]


@runtime_checkable
class Fetcher(Protocol[ResponseT_co]):
    """Terminal step of a fluent request chain."""

    def fetch(self) -> Future[ResponseT_co]:
        """Issue the request; completion is reported through callbacks and the future."""
