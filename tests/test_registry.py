"""
Tests for the retailer feed registry
"""
import pytest
from pydantic import ValidationError

from app.sources.registry import FUEL_SOURCES, get_source, get_sources


def test_registry_lists_all_retailers():
    assert len(FUEL_SOURCES) == 14
    assert FUEL_SOURCES[0].name == "Applegreen UK"
    assert FUEL_SOURCES[-1].name == "Tesco"


def test_disabled_sources_are_skipped():
    names = [s.name for s in get_sources()]
    assert "bp" not in names
    assert len(names) == 13
    assert names == [s.name for s in FUEL_SOURCES if s.enabled]


def test_urls_are_https_and_unique():
    urls = [s.url for s in FUEL_SOURCES]
    assert all(url.startswith("https://") for url in urls)
    assert len(set(urls)) == len(urls)


def test_get_source():
    assert get_source("Asda").url == "https://storelocator.asda.com/fuel_prices_data.json"
    assert get_source("Nonexistent") is None


def test_sources_are_immutable():
    with pytest.raises(ValidationError):
        FUEL_SOURCES[0].url = "https://elsewhere.example"
