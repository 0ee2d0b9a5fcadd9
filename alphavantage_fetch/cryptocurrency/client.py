"""Access to digital currency series and crypto health index data."""

from __future__ import annotations

import logging
from concurrent.futures import CancelledError, Future
from functools import partial
from typing import Any, ClassVar, Generic, Mapping, Self, TypeAlias, TypeVar

from ..contracts.fetcher import FailureCallback, SuccessCallback
from ..core.config import Config
from ..core.errors import (
    AlphaVantageError,
    ConfigurationError,
    RemoteApiError,
    ResponseDecodeError,
    ThrottleError,
    TransportError,
)
from ..core.queries import (
    CryptoRequest,
    DigitalCurrencyRequest,
    DigitalCurrencyRequestBuilder,
    RatingRequest,
    RatingRequestBuilder,
)
from ..core.transport import HttpTransport
from ..core.url_extractor import extract, extract_params
from ..models.crypto import CryptoResponse, RatingResponse
from ..models.shared import Function

logger = logging.getLogger(__name__)

CryptoResult: TypeAlias = CryptoResponse | RatingResponse
ResponseT = TypeVar("ResponseT", CryptoResponse, RatingResponse)


def parse_response(request: CryptoRequest, payload: Any) -> CryptoResult:
    """Project a decoded body into the response type matching ``request``."""

    if not isinstance(payload, Mapping):
        raise ResponseDecodeError(f"Expected a JSON object, got {type(payload).__name__}")
    if isinstance(request, RatingRequest):
        return RatingResponse.of(payload)
    if isinstance(request, DigitalCurrencyRequest):
        return CryptoResponse.of(payload, request.market)
    raise TypeError(f"Unsupported request type {type(request).__name__}")


class Crypto:
    """Fetcher for the cryptocurrency API family.

    Typical usage::

        crypto = Crypto(Config(key="demo"))
        crypto.daily().for_symbol("BTC").market("USD").on_success(print).fetch()

    Every fetch carries its own request and callbacks through the asynchronous
    continuation, so one instance may serve overlapping fetches.
    """

    def __init__(self, config: Config | None, *, transport: HttpTransport | None = None) -> None:
        self._config = config
        if transport is None:
            settings = config or Config()
            transport = HttpTransport(timeout=settings.timeout, max_workers=settings.max_workers)
            self._owns_transport = True
        else:
            self._owns_transport = False
        self._transport = transport

    # Proxies -----------------------------------------------------------
    def daily(self) -> "DailyRequestProxy":
        """Access daily digital currency series."""

        return DailyRequestProxy(self)

    def weekly(self) -> "WeeklyRequestProxy":
        """Access weekly digital currency series."""

        return WeeklyRequestProxy(self)

    def monthly(self) -> "MonthlyRequestProxy":
        """Access monthly digital currency series."""

        return MonthlyRequestProxy(self)

    def rating(self) -> "RatingRequestProxy":
        """Access the crypto health index (FCAS rating)."""

        return RatingRequestProxy(self)

    # Fetching ----------------------------------------------------------
    def fetch(
        self,
        request: CryptoRequest,
        *,
        on_success: SuccessCallback[Any] | None = None,
        on_failure: FailureCallback | None = None,
    ) -> Future[CryptoResult]:
        """Issue one GET for ``request``.

        Raises :class:`ConfigurationError` before any I/O when no API key is
        configured. Everything that goes wrong afterwards is delivered to
        ``on_failure`` (or nowhere, when it is ``None``) and stored on the
        returned future.
        """

        config = self._config
        if config is None or not config.key:
            raise ConfigurationError("Config not set: an API key is required")

        params = extract_params(request)
        logger.debug("Fetching %s from %s", extract(request), config.base_url)

        pending = self._transport.get_json(config.base_url, {**params, "apikey": config.key})
        result: Future[CryptoResult] = Future()
        result.set_running_or_notify_cancel()
        pending.add_done_callback(partial(self._complete, request, on_success, on_failure, result))
        return result

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    # Internal ----------------------------------------------------------
    def _complete(
        self,
        request: CryptoRequest,
        on_success: SuccessCallback[Any] | None,
        on_failure: FailureCallback | None,
        result: Future[CryptoResult],
        pending: Future[Any],
    ) -> None:
        try:
            response = parse_response(request, pending.result())
        except AlphaVantageError as exc:
            self._deliver_failure(exc, on_failure, result)
            return
        except CancelledError:
            error = TransportError(f"{request.function} request was cancelled")
            self._deliver_failure(error, on_failure, result)
            return
        except Exception as exc:
            logger.exception("Unexpected error while completing %s fetch", request.function)
            error = ResponseDecodeError(f"Could not decode {request.function} response: {exc!r}")
            error.__cause__ = exc
            self._deliver_failure(error, on_failure, result)
            return

        if response.error_message is not None:
            error_type = ThrottleError if response.throttled else RemoteApiError
            self._deliver_failure(error_type(response.error_message, response=response), on_failure, result)
            return

        logger.debug("Dispatching %s response", request.function)
        if on_success is not None:
            try:
                on_success(response)
            except Exception as exc:
                result.set_exception(exc)
                return
        result.set_result(response)

    def _deliver_failure(
        self,
        error: AlphaVantageError,
        on_failure: FailureCallback | None,
        result: Future[CryptoResult],
    ) -> None:
        logger.debug("Fetch failed: %s", error)
        if on_failure is not None:
            try:
                on_failure(error)
            except Exception as exc:
                result.set_exception(exc)
                return
        result.set_exception(error)


class RequestProxy(Generic[ResponseT]):
    """Fluent handle for one request: chainable setters plus a terminal ``fetch``.

    A proxy starts without callbacks. Obtain a new proxy for every request.
    """

    def __init__(
        self,
        crypto: Crypto,
        builder: DigitalCurrencyRequestBuilder | RatingRequestBuilder,
    ) -> None:
        self._crypto = crypto
        self._builder = builder
        self._success_callback: SuccessCallback[ResponseT] | None = None
        self._failure_callback: FailureCallback | None = None

    def for_symbol(self, symbol: str) -> Self:
        self._builder.symbol(symbol)
        return self

    def on_success(self, callback: SuccessCallback[ResponseT]) -> Self:
        self._success_callback = callback
        return self

    def on_failure(self, callback: FailureCallback) -> Self:
        self._failure_callback = callback
        return self

    def build(self) -> CryptoRequest:
        return self._builder.build()

    def fetch(self) -> Future[ResponseT]:
        return self._crypto.fetch(  # type: ignore[return-value]
            self.build(),
            on_success=self._success_callback,
            on_failure=self._failure_callback,
        )


class _DigitalCurrencyRequestProxy(RequestProxy[CryptoResponse]):
    function: ClassVar[Function]

    def __init__(self, crypto: Crypto) -> None:
        self._digital_builder = DigitalCurrencyRequestBuilder(self.function)
        super().__init__(crypto, self._digital_builder)

    def market(self, market: str) -> Self:
        self._digital_builder.market(market)
        return self


class DailyRequestProxy(_DigitalCurrencyRequestProxy):
    """Proxy for a daily :class:`DigitalCurrencyRequest`."""

    function = Function.DIGITAL_CURRENCY_DAILY


class WeeklyRequestProxy(_DigitalCurrencyRequestProxy):
    """Proxy for a weekly :class:`DigitalCurrencyRequest`."""

    function = Function.DIGITAL_CURRENCY_WEEKLY


class MonthlyRequestProxy(_DigitalCurrencyRequestProxy):
    """Proxy for a monthly :class:`DigitalCurrencyRequest`."""

    function = Function.DIGITAL_CURRENCY_MONTHLY


class RatingRequestProxy(RequestProxy[RatingResponse]):
    """Proxy for a :class:`RatingRequest`."""

    def __init__(self, crypto: Crypto) -> None:
        super().__init__(crypto, RatingRequestBuilder())
