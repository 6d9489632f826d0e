"""
Core functionality for the Fuel Price Finder API
"""
from app.core.exceptions import (
    FeedError, FeedFetchError, FeedHttpStatusError, FeedParseError,
    FeedTimeoutError, MissingQueryError
)

__all__ = [
    "FeedError", "FeedFetchError", "FeedHttpStatusError", "FeedParseError",
    "FeedTimeoutError", "MissingQueryError"
]
