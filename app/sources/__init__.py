"""
Registry of retailer fuel-price feeds.
"""

from app.sources.registry import FUEL_SOURCES, get_source, get_sources

__all__ = ["FUEL_SOURCES", "get_source", "get_sources"]
