"""
Error types for feed fetching and the search boundary
"""
from typing import Optional


class FeedError(Exception):
    """Base class for failures while fetching a single feed"""

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        super().__init__(message or f"Failed to fetch {url}")


class FeedTimeoutError(FeedError):
    """Feed did not respond within the fetch deadline"""

    def __init__(self, url: str, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(url, f"Timed out after {timeout_seconds:g}s fetching {url}")


class FeedHttpStatusError(FeedError):
    """Feed responded with a non-success status"""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"Failed to fetch {url} (HTTP {status_code})")


class FeedParseError(FeedError):
    """Feed body was not valid JSON"""

    def __init__(self, url: str):
        super().__init__(url, f"Invalid JSON returned by {url}")


class FeedFetchError(FeedError):
    """Transport-level failure (DNS, connection refused, TLS...)"""


class MissingQueryError(Exception):
    """Search parameter `q` was absent or blank"""

    def __init__(self, message: str = "Please provide a city or town name in the `q` query parameter."):
        self.message = message
        super().__init__(message)
