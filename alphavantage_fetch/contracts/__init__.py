"""Interfaces implemented by API family fetchers."""

from .fetcher import FailureCallback, Fetcher, SuccessCallback

__all__ = ["FailureCallback", "Fetcher", "SuccessCallback"]
