"""HTTP client wrapper with a fixed identifying User-Agent."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from collectors.errors import FetchError, ParseError

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (active-portfolio-jobs-bot)"


@dataclass
class FetchResult:
    """Result of a successful HTTP fetch."""

    url: str
    status_code: int
    text: str


class HttpClient:
    """Async HTTP client. No retries: a failure is reported once and the
    company is retried on the next scheduled run."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self._transport = transport

        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> HttpClient:
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> FetchResult:
        """GET ``url`` and return its body.

        Raises:
            FetchError: On network failure, timeout or a non-2xx status
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        start_time = time.monotonic()
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise FetchError(f"Timed out fetching {url}", url=url) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {url} failed: {e}", url=url) from e

        duration_ms = (time.monotonic() - start_time) * 1000
        logger.debug(
            "fetched",
            url=url,
            status=response.status_code,
            size_kb=round(len(response.content) / 1024, 1),
            duration_ms=round(duration_ms),
        )

        if not response.is_success:
            raise FetchError(
                f"HTTP {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
            )

        return FetchResult(
            url=url,
            status_code=response.status_code,
            text=response.text,
        )

    async def fetch_json(self, url: str) -> Any:
        """GET ``url`` and decode a JSON body.

        Raises:
            FetchError: As for :meth:`fetch`
            ParseError: If the body is not valid JSON
        """
        result = await self.fetch(url)
        try:
            return json.loads(result.text)
        except ValueError as e:
            raise ParseError(f"Invalid JSON from {url}: {e}", url=url) from e
