"""
Pydantic schemas for fuel sources and normalized stations.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Union


class Source(BaseModel):
    """A registered retailer feed"""
    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    enabled: bool = True


class Location(BaseModel):
    """Station coordinates, kept as text exactly as rendered from the feed"""
    latitude: str
    longitude: str


class Station(BaseModel):
    """Canonical fuel station record"""
    site_id: str
    brand: str
    address: str
    postcode: Optional[str] = None
    location: Location
    prices: Dict[str, Union[int, float]] = Field(default_factory=dict)


class StationSearchResponse(BaseModel):
    """Response schema for a station search"""
    stations: List[Station] = []


class SourceReport(BaseModel):
    """Outcome of fetching one source"""
    name: str
    url: str
    enabled: bool = True
    stations: Optional[int] = None
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body returned by the search boundary"""
    error: str
