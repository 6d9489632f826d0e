"""
Tests for address filtering and the search pipeline
"""
import pytest

from app.schemas.fuel import Location, Station
from app.scrapers.feed_fetcher import TimedFetcher
from app.services.aggregator import FuelPriceAggregator
from app.services.feed_normalizer import FeedNormalizer
from app.services.station_search import filter_stations, search_stations
from tests.feed_helpers import SLOW, SOURCE_A, SOURCE_B, build_feed_transport


def _station(site_id, address):
    return Station(
        site_id=site_id,
        brand="ACME",
        address=address,
        location=Location(latitude="51.5", longitude="-0.1"),
    )


STATIONS = [
    _station("1", "123 London Road, Croydon"),
    _station("2", "1 High St, Bristol"),
    _station("3", "Londonderry Way, Leeds"),
    _station("4", "123 London Road, Croydon"),
]


def test_case_insensitive_substring():
    assert [s.site_id for s in filter_stations(STATIONS, "don")] == ["1", "3", "4"]
    assert [s.site_id for s in filter_stations(STATIONS, "BRISTOL")] == ["2"]
    assert [s.site_id for s in filter_stations(STATIONS, "High St")] == ["2"]


def test_no_match_is_empty_list():
    assert filter_stations(STATIONS, "aberdeen") == []


def test_order_kept_and_duplicates_not_removed():
    result = filter_stations(STATIONS, "croydon")
    assert [s.site_id for s in result] == ["1", "4"]


def test_query_not_trimmed():
    assert filter_stations(STATIONS, " leeds") == [STATIONS[2]]
    assert filter_stations(STATIONS, "bristol ") == []


def test_empty_input():
    assert filter_stations([], "london") == []


@pytest.mark.asyncio
async def test_search_with_one_source_timing_out(bristol_feed):
    transport = build_feed_transport({SOURCE_A.url: bristol_feed, SOURCE_B.url: SLOW})
    aggregator = FuelPriceAggregator(
        fetcher=TimedFetcher({"timeout": 0.05, "transport": transport}),
        normalizer=FeedNormalizer(),
        sources=[SOURCE_A, SOURCE_B],
    )

    found = await search_stations("bristol", aggregator=aggregator)
    assert [s.site_id for s in found] == ["1"]
    assert found[0].brand == "Alpha Fuels"

    assert await search_stations("london", aggregator=aggregator) == []
