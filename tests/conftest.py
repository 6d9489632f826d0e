# tests/conftest.py
import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture
def calls():
    """URLs requested from the fake feed transport"""
    return []


@pytest.fixture
def bristol_feed():
    return [
        {
            "site_id": "1",
            "address": "1 High St, Bristol",
            "location": {"latitude": "51.4", "longitude": "-2.5"},
            "prices": {"E10": 1.4},
        }
    ]


@pytest.fixture
def london_feed():
    return {
        "last_updated": "17/10/2026 08:00:00",
        "stations": [
            {
                "site_id": "gb-100",
                "brand": "BETA",
                "address": "123 London Road, Croydon",
                "postcode": "CR0 2AA",
                "location": {"latitude": 51.3721, "longitude": -0.0982},
                "prices": {"E10": 139.9, "B7": 147.9},
            },
            {
                "site_id": "gb-101",
                "address": "9 Station Approach, London",
                "location": {"latitude": 51.5, "longitude": -0.12},
            },
        ],
    }
