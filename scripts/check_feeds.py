#!/usr/bin/env python3
"""
Fetch every retailer feed once and print how many stations each one yields.
Useful for spotting feeds that moved, went HTML-only, or changed shape.
"""
import sys
import os
import asyncio
from typing import Optional

# Add parent directory to path to import app modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.scrapers.feed_fetcher import TimedFetcher
from app.services.aggregator import FuelPriceAggregator


async def check_feeds(aggregator: Optional[FuelPriceAggregator] = None) -> int:
    """Print a per-source report; return the number of failing sources"""
    print("=" * 60)
    print("Fuel Feed Check")
    print("=" * 60)

    if aggregator is None:
        # No cache: every feed is fetched live
        aggregator = FuelPriceAggregator(fetcher=TimedFetcher())
    reports = await aggregator.collect_source_reports()

    failures = 0
    total = 0
    for report in reports:
        if report.error:
            failures += 1
            print(f"  ✗ {report.name}: {report.error}")
        else:
            total += report.stations or 0
            print(f"  ✓ {report.name}: {report.stations} stations")

    print(f"\n{'='*60}")
    print(f"Sources checked: {len(reports)}")
    print(f"Failing sources: {failures}")
    print(f"Total stations: {total}")
    print(f"{'='*60}\n")

    return failures


if __name__ == "__main__":
    failed = asyncio.run(check_feeds())
    sys.exit(1 if failed else 0)
