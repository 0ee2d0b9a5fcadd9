"""Requests-backed asynchronous GET used by every fetcher."""

from __future__ import annotations

import logging
import re
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Mapping

import requests

from .config import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT
from .errors import ResponseDecodeError, TransportError

logger = logging.getLogger(__name__)

_APIKEY_QUERY_RE = re.compile(r"(apikey=)([^&\s]+)", re.IGNORECASE)


def redact(text: str) -> str:
    """Hide the API key in URLs before they reach a log record."""

    return _APIKEY_QUERY_RE.sub(r"\1[REDACTED]", text)


class HttpTransport:
    """Issues GET requests on a worker pool and decodes JSON bodies.

    Each call to :meth:`get_json` performs exactly one HTTP request; there are
    no retries. Completion happens on a pool thread.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = DEFAULT_MAX_WORKERS,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="alphavantage"
        )
        self._owns_executor = executor is None
        self._timeout = timeout

    def get_json(self, url: str, params: Mapping[str, str]) -> Future[Any]:
        """Schedule a GET and return a future resolving to the decoded body."""

        try:
            return self._executor.submit(self._request, url, dict(params))
        except RuntimeError as exc:
            raise TransportError(f"Cannot schedule a request to {url}: {exc}") from exc

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False)
        if self._owns_session:
            self._session.close()

    def _request(self, url: str, params: dict[str, str]) -> Any:
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.warning("GET %s failed: %s", url, redact(str(exc)))
            raise TransportError(f"Failed to call {url}: {redact(str(exc))}") from exc

        if not 200 <= response.status_code < 300:
            logger.warning("GET %s returned HTTP %s", url, response.status_code)
            raise TransportError(f"HTTP {response.status_code}", status_code=response.status_code)
        return self._decode_response(response)

    def _decode_response(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except (ValueError, RecursionError) as exc:
            raise ResponseDecodeError("Alpha Vantage returned a non-JSON payload") from exc
