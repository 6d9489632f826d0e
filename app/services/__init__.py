"""
Services for the Fuel Price Finder API
"""
from app.services.feed_cache import FeedCache, get_feed_cache
from app.services.feed_normalizer import FeedNormalizer, get_feed_normalizer

__all__ = ["FeedCache", "get_feed_cache", "FeedNormalizer", "get_feed_normalizer"]
