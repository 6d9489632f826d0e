"""
Station search: address filtering over the aggregated feeds
"""
from typing import Iterable, List, Optional
import logging

from app.schemas.fuel import Station
from app.services.aggregator import FuelPriceAggregator, get_aggregator

logger = logging.getLogger(__name__)


def filter_stations(stations: Iterable[Station], query: str) -> List[Station]:
    """
    Case-insensitive substring match on the station address.
    Keeps input order and does not deduplicate. `query` is not validated here.
    """
    needle = query.lower()
    return [station for station in stations if needle in station.address.lower()]


async def search_stations(query: str, aggregator: Optional[FuelPriceAggregator] = None) -> List[Station]:
    """
    Aggregate all feeds, then filter by address

    Args:
        query: Non-blank search text (validated by the caller)
        aggregator: Aggregator to use (defaults to the shared instance)

    Returns:
        Matching stations
    """
    aggregator = aggregator or get_aggregator()
    stations = await aggregator.aggregate_all()
    results = filter_stations(stations, query)
    logger.info(f"Search '{query}' matched {len(results)} of {len(stations)} stations")
    return results
