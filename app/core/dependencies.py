"""
FastAPI dependencies for the station search endpoints
"""
from fastapi import Query
from typing import Optional

from app.core.exceptions import MissingQueryError
from app.services.aggregator import FuelPriceAggregator, get_aggregator


async def require_query(
    q: Optional[str] = Query(None, description="City, town or street to look for in station addresses")
) -> str:
    """
    Validate the search parameter before any feed is fetched

    Args:
        q: Raw `q` query parameter

    Returns:
        str: The lower-cased query (not trimmed)

    Raises:
        MissingQueryError: If `q` is missing, empty or whitespace only
    """
    if q is None or not q.strip():
        raise MissingQueryError()
    return q.lower()


def get_search_aggregator() -> FuelPriceAggregator:
    """
    Aggregator used by search endpoints
    Usage in FastAPI endpoints: aggregator = Depends(get_search_aggregator)
    """
    return get_aggregator()
