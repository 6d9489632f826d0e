"""
Pydantic schemas for the Fuel Price Finder API
"""
from app.schemas.fuel import (
    Source, Location, Station, StationSearchResponse,
    SourceReport, ErrorResponse
)

__all__ = [
    "Source", "Location", "Station", "StationSearchResponse",
    "SourceReport", "ErrorResponse"
]
