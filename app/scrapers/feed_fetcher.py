"""
Timed fetcher for retailer JSON feeds.
"""

from typing import Dict, Any, Optional
import asyncio
import httpx
import logging

from app.config import settings
from app.core.exceptions import (
    FeedFetchError,
    FeedHttpStatusError,
    FeedParseError,
    FeedTimeoutError,
)
from app.services.feed_cache import FeedCache

logger = logging.getLogger(__name__)


class TimedFetcher:
    """Fetch one JSON feed with a hard deadline (single attempt, no retry)"""

    def __init__(self, config: Optional[Dict[str, Any]] = None, cache: Optional[FeedCache] = None):
        """
        Initialize fetcher.

        Args:
            config: Configuration dictionary with optional keys
                - timeout: deadline in seconds (defaults to FETCH_TIMEOUT_MS)
                - user_agent: User-Agent header sent to feeds
                - transport: httpx transport override
            cache: Optional freshness-window cache; fetching is correct without it
        """
        config = config or {}
        self.config = config
        self.timeout = config.get('timeout', settings.fetch_timeout_seconds)
        self.transport = config.get('transport')
        self.cache = cache
        self.headers = {
            "Accept": "application/json",
            "User-Agent": config.get('user_agent', settings.USER_AGENT)
        }

    def create_client(self) -> httpx.AsyncClient:
        """Create an HTTP client configured for feed requests."""
        return httpx.AsyncClient(
            headers=self.headers,
            transport=self.transport,
            follow_redirects=True
        )

    async def fetch(
        self,
        url: str,
        timeout_ms: Optional[int] = None,
        client: Optional[httpx.AsyncClient] = None
    ) -> Any:
        """
        GET a feed and parse its body as JSON.

        Args:
            url: Feed URL
            timeout_ms: Deadline override in milliseconds
            client: Shared HTTP client; a private one is opened and closed otherwise

        Returns:
            The parsed JSON payload (shape not checked)

        Raises:
            FeedTimeoutError: Deadline expired; the in-flight request is cancelled
            FeedHttpStatusError: Non-2xx response
            FeedParseError: Body is not valid JSON
            FeedFetchError: Transport failure
        """
        if self.cache is not None:
            cached = self.cache.get(url)
            if cached is not None:
                return cached

        timeout = timeout_ms / 1000 if timeout_ms is not None else self.timeout

        if client is None:
            async with self.create_client() as own_client:
                payload = await self._fetch_with_deadline(own_client, url, timeout)
        else:
            payload = await self._fetch_with_deadline(client, url, timeout)

        # A null payload is indistinguishable from a cache miss, so it is never stored
        if self.cache is not None and payload is not None:
            self.cache.set(url, payload)

        return payload

    async def _fetch_with_deadline(self, client: httpx.AsyncClient, url: str, timeout: float) -> Any:
        # wait_for cancels the request task and drops its timer on every exit path
        try:
            return await asyncio.wait_for(self._get_json(client, url, timeout), timeout=timeout)
        except asyncio.TimeoutError:
            raise FeedTimeoutError(url, timeout) from None

    async def _get_json(self, client: httpx.AsyncClient, url: str, timeout: float) -> Any:
        logger.debug(f"Fetching feed: {url}")

        try:
            response = await client.get(url, timeout=timeout)
        except httpx.TimeoutException as e:
            raise FeedTimeoutError(url, timeout) from e
        except httpx.HTTPError as e:
            raise FeedFetchError(url, f"Error fetching {url}: {e}") from e

        if not response.is_success:
            raise FeedHttpStatusError(url, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise FeedParseError(url) from e
