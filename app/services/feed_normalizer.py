"""
Feed Normalizer Service
Maps each retailer's raw JSON feed into canonical Station records
"""
from typing import Any, Dict, List, Optional, Union
import math
import logging

from pydantic import ValidationError

from app.schemas.fuel import Location, Station

logger = logging.getLogger(__name__)

# Marks a key that is absent from the raw record (as opposed to JSON null)
_MISSING = object()

REQUIRED_FIELDS = ("site_id", "address", "location")


def is_present(value: Any) -> bool:
    """
    Presence test used by retailer feeds: null, false, 0, NaN and "" count as
    absent, while empty objects and lists count as present.
    """
    if value is None or value is _MISSING or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == value and value != 0
    return True


def to_text(value: Any = _MISSING) -> str:
    """Render a raw JSON value as text the way the feeds' web clients do."""
    if value is _MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (list, tuple)):
        # Array join: null items render empty
        return ",".join("" if item is None else to_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def clean_prices(raw: Any) -> Dict[str, Union[int, float]]:
    """Keep fuel prices that are numbers or numeric strings; numbers keep their form."""
    if not isinstance(raw, dict):
        return {}

    prices: Dict[str, Union[int, float]] = {}
    for fuel_type, price in raw.items():
        if isinstance(price, bool):
            continue
        if isinstance(price, str):
            try:
                price = float(price)
            except ValueError:
                continue
        if isinstance(price, (int, float)) and math.isfinite(price):
            prices[str(fuel_type)] = price
    return prices


class FeedNormalizer:
    """
    Service for turning a retailer payload into Station records.

    Feeds come in two shapes: a bare list of stations, or an envelope object
    with the list under "stations". Individual malformed entries are dropped,
    never fatal to the feed.
    """

    def extract_station_list(self, payload: Any) -> Optional[List[Any]]:
        """
        Locate the station list inside a payload

        Args:
            payload: Parsed JSON from one feed

        Returns:
            The raw station list, or None when the shape is not recognized
        """
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict) and isinstance(payload.get("stations"), list):
            return payload["stations"]
        return None

    def normalize_station(self, raw: Any, source_name: str) -> Optional[Station]:
        """
        Build one Station from a raw entry

        Args:
            raw: Raw station entry
            source_name: Registry name of the feed, used when brand is missing

        Returns:
            Station, or None when required fields are missing
        """
        if not isinstance(raw, dict):
            return None
        if not all(is_present(raw.get(field)) for field in REQUIRED_FIELDS):
            return None

        location = raw["location"]
        if not isinstance(location, dict):
            location = {}

        brand = raw.get("brand")
        postcode = raw.get("postcode")

        try:
            return Station(
                site_id=to_text(raw["site_id"]),
                brand=to_text(brand) if is_present(brand) else source_name,
                address=to_text(raw["address"]),
                postcode=to_text(postcode) if postcode is not None else None,
                location=Location(
                    latitude=to_text(location.get("latitude", _MISSING)),
                    longitude=to_text(location.get("longitude", _MISSING)),
                ),
                prices=clean_prices(raw.get("prices")),
            )
        except ValidationError as e:
            logger.debug(f"Dropping malformed station from {source_name}: {e}")
            return None

    def normalize(self, payload: Any, source_name: str) -> List[Station]:
        """
        Normalize every usable station in a feed

        Args:
            payload: Parsed JSON from one feed
            source_name: Registry name of the feed

        Returns:
            Stations in feed order (empty when the shape is unrecognized)
        """
        raw_stations = self.extract_station_list(payload)
        if raw_stations is None:
            logger.warning(f"Unexpected structure from {source_name}")
            return []

        stations = []
        for raw in raw_stations:
            station = self.normalize_station(raw, source_name)
            if station is not None:
                stations.append(station)

        skipped = len(raw_stations) - len(stations)
        if skipped:
            logger.debug(f"Skipped {skipped} incomplete entries from {source_name}")

        return stations


# Singleton instance
_feed_normalizer = None

def get_feed_normalizer() -> FeedNormalizer:
    """Get or create the feed normalizer singleton"""
    global _feed_normalizer
    if _feed_normalizer is None:
        _feed_normalizer = FeedNormalizer()
    return _feed_normalizer
