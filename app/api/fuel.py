"""
Fuel price API endpoints
"""

from fastapi import APIRouter, Depends
from typing import List
import logging

from app.core.dependencies import get_search_aggregator, require_query
from app.schemas.fuel import ErrorResponse, Source, StationSearchResponse
from app.services.aggregator import FuelPriceAggregator
from app.services.station_search import search_stations
from app.sources.registry import FUEL_SOURCES

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/fuel",
    tags=["fuel"]
)


@router.get(
    "",
    response_model=StationSearchResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}}
)
async def search_fuel_stations(
    q: str = Depends(require_query),
    aggregator: FuelPriceAggregator = Depends(get_search_aggregator)
):
    """
    Search all retailer feeds for stations whose address contains `q`.

    Feeds that fail or time out are skipped; the response does not say
    which ones.

    Returns:
        {"stations": [...]}
    """
    stations = await search_stations(q, aggregator=aggregator)
    return StationSearchResponse(stations=stations)


@router.get("/sources", response_model=List[Source])
async def list_fuel_sources():
    """List every registered retailer feed, including disabled ones."""
    return list(FUEL_SOURCES)
