"""
Feed Cache Service
Keeps successfully fetched feed payloads for a short freshness window
"""
from typing import Any, Callable, Dict, Optional, Tuple
import time
import logging

from app.config import settings

logger = logging.getLogger(__name__)


class FeedCache:
    """
    In-process payload cache keyed by feed URL.

    Only touched from the event loop thread, so no locking is needed.
    Entries older than `ttl_seconds` are treated as absent and evicted on read.
    """

    def __init__(self, ttl_seconds: float = 60, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}

    def get(self, url: str) -> Optional[Any]:
        """
        Return the cached payload for a URL if it is still fresh

        Args:
            url: Feed URL

        Returns:
            Parsed payload, or None when missing or expired
        """
        entry = self._entries.get(url)
        if entry is None:
            return None

        stored_at, payload = entry
        age = self._clock() - stored_at
        if age >= self.ttl_seconds:
            # Expired, force a refetch
            del self._entries[url]
            logger.debug(f"Cache expired for {url} (age {age:.1f}s)")
            return None

        logger.debug(f"Cache hit for {url} (age {age:.1f}s)")
        return payload

    def set(self, url: str, payload: Any) -> None:
        self._entries[url] = (self._clock(), payload)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


# Singleton instance
_feed_cache = None

def get_feed_cache() -> Optional[FeedCache]:
    """Get or create the feed cache singleton (None when caching is disabled)"""
    global _feed_cache
    if not settings.ENABLE_FEED_CACHE:
        return None
    if _feed_cache is None:
        _feed_cache = FeedCache(ttl_seconds=settings.FEED_CACHE_TTL_SECONDS)
    return _feed_cache
