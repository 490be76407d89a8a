"""HTTP fetcher implementation using httpx."""

import asyncio

import httpx

from ..errors import describe_error
from .protocols import FetchOutcome, FetchSuccess, HttpError, Response, TransportError

DEFAULT_USER_AGENT = "PageScraper/0.1 (+https://github.com/page-scraper)"


class HttpFetcher:
    """Async HTTP fetcher using httpx with connection reuse.

    A fetch is a single attempt. Network failures come back as
    ``TransportError`` and non-2xx statuses as ``HttpError``.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = httpx.Timeout(timeout)
        self.user_agent = user_agent
        self.limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        )
        self.transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with double-checked locking."""
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        timeout=self.timeout,
                        limits=self.limits,
                        headers={"User-Agent": self.user_agent},
                        follow_redirects=True,
                        transport=self.transport,
                    )
        return self._client

    async def fetch(self, url: str) -> FetchOutcome:
        """Fetch a URL and classify the outcome."""
        client = await self._get_client()
        try:
            resp = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return TransportError(message=describe_error(exc))

        if not resp.is_success:
            return HttpError(status=resp.status_code, status_text=resp.reason_phrase)

        return FetchSuccess(
            response=Response(
                url=str(resp.url),
                status=resp.status_code,
                content=resp.content,
                headers=dict(resp.headers),
                reason=resp.reason_phrase,
                encoding=resp.encoding or "utf-8",
            )
        )

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
