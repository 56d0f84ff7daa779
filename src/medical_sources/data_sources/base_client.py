"""
Base client for all HTTP data source clients.

Provides: aiohttp session management, the identifying User-Agent header,
HTTP status -> exception mapping, and structured request logging.
Retry is opt-in per operation via `medical_sources.utils.retry.with_retry`.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import aiohttp

from medical_sources.config import get_settings

logger = logging.getLogger("medical_sources.data_sources")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


class RateLimitError(DataSourceError):
    """Raised when the source answers 429 Too Many Requests."""

    pass


class DrugSearchError(DataSourceError):
    """
    Failure of the openFDA drug search, after retries.

    Keeps the underlying error (also chained as __cause__) together with the
    request context so callers can render a diagnostic.
    """

    def __init__(
        self,
        original_error: Exception,
        *,
        query: str,
        search_field: str | None,
        search_expression: str,
        url: str,
        retry_attempted: bool,
    ):
        self.original_error = original_error
        self.query = query
        self.search_field = search_field
        self.search_expression = search_expression
        self.url = url
        self.retry_attempted = retry_attempted
        super().__init__(
            "openfda",
            f"Drug search failed for {search_expression!r}: {original_error}",
            status_code=getattr(original_error, "status_code", None),
        )


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for the openFDA, PubMed, World Bank and RxNorm clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_get_json()` or `_get_text()`.
    """

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        read_timeout_seconds: float | None = None,
        user_agent: str | None = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.read_timeout_seconds = read_timeout_seconds
        self.user_agent = user_agent or get_settings().user_agent
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'openfda'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(
                total=self.timeout_seconds, sock_read=self.read_timeout_seconds
            )
            self._session = aiohttp.ClientSession(
                timeout=timeout, headers={"User-Agent": self.user_agent}
            )
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Single-shot requests -------------------------------------------------

    async def _get(self, url: str, params: dict[str, Any] | None = None) -> str:
        """
        Perform one GET and return the response body as text.

        Raises DataSourceError (RateLimitError for 429) carrying the HTTP
        status for any response >= 400, and DataSourceError without a status
        for timeouts and connection failures.
        """
        session = await self._get_session()
        logger.info("Request [%s] url=%s params=%s", self._source_name, url, params)
        try:
            async with session.get(url, params=params) as resp:
                body = await resp.text()
                if resp.status == 429:
                    raise RateLimitError(
                        self._source_name,
                        f"HTTP 429: {body[:200]}",
                        status_code=429,
                    )
                if resp.status >= 400:
                    raise DataSourceError(
                        self._source_name,
                        f"HTTP {resp.status}: {body[:500]}",
                        status_code=resp.status,
                    )
                return body
        except asyncio.TimeoutError as e:
            raise DataSourceError(
                self._source_name, f"Timeout after {self.timeout_seconds:.1f}s"
            ) from e
        except aiohttp.ClientError as e:
            raise DataSourceError(self._source_name, f"Connection error: {e}") from e

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET and decode a JSON body."""
        text = await self._get(url, params)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DataSourceError(
                self._source_name, f"Invalid JSON response: {e}"
            ) from e

    async def _get_text(self, url: str, params: dict[str, Any] | None = None) -> str:
        """GET and return the raw body (XML sources)."""
        return await self._get(url, params)
