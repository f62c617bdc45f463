"""Base HTTP client for the data.gov.in resource API with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from settings import API_BASE_URL, API_KEY, API_TIMEOUT


class UpstreamUnavailable(Exception):
    """Upstream API unreachable, failing or returning malformed data."""

    def __init__(self, message: str = "Upstream API unavailable"):
        self.message = message
        super().__init__(self.message)


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with rate limiting and exponential backoff.

    Use as ``async with`` to share one connection pool across many requests;
    outside of a context block every request opens a short-lived client.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        api_key: str = API_KEY,
        timeout: float = API_TIMEOUT,
        max_concurrent: int = 5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.debug("{}: base_url={}, timeout={}s", self.__class__.__name__, self._base_url, timeout)

    @property
    def request_count(self) -> int:
        return self._request_count

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=5),
            transport=self._transport,
        )

    async def __aenter__(self):
        self._client = self._new_client()
        return self

    async def __aexit__(self, *_):
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    @retry(
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _get(self, path: str, params: dict | None = None) -> dict | list:
        """GET request with retry logic. The API key and JSON format are always sent."""
        query = {"api-key": self._api_key, "format": "json", **(params or {})}
        url = f"{self._base_url}/{path}"
        async with self._sem:
            self._request_count += 1
            if self._client is not None:
                resp = await self._client.get(url, params=query)
            else:
                async with self._new_client() as client:
                    resp = await client.get(url, params=query)
            resp.raise_for_status()
            return resp.json()
