"""
Fuel Price Aggregator
Fetches every registered retailer feed concurrently and merges the stations.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
import asyncio
import logging

import httpx

from app.core.exceptions import FeedError
from app.schemas.fuel import Source, SourceReport, Station
from app.scrapers.feed_fetcher import TimedFetcher
from app.services.feed_cache import get_feed_cache
from app.services.feed_normalizer import FeedNormalizer, get_feed_normalizer
from app.sources.registry import get_sources

logger = logging.getLogger(__name__)

SourceOutcome = Tuple[List[Station], Optional[str]]


class FuelPriceAggregator:
    """Aggregates stations from all retailer feeds"""

    def __init__(
        self,
        fetcher: Optional[TimedFetcher] = None,
        normalizer: Optional[FeedNormalizer] = None,
        sources: Optional[Sequence[Source]] = None
    ):
        """
        Initialize aggregator.

        Args:
            fetcher: Feed fetcher (defaults to one backed by the shared feed cache)
            normalizer: Feed normalizer (defaults to the shared instance)
            sources: Fixed source list (defaults to the enabled registry entries)
        """
        self.fetcher = fetcher or TimedFetcher(cache=get_feed_cache())
        self.normalizer = normalizer or get_feed_normalizer()
        self.sources = list(sources) if sources is not None else None

    async def aggregate_all(self, sources: Optional[Iterable[Source]] = None) -> List[Station]:
        """
        Collect stations from every source.

        A failing source contributes nothing and never affects the others.
        The result keeps registry order, then each feed's own order.

        Args:
            sources: Sources to query (defaults to the aggregator's own list)

        Returns:
            Combined list of stations
        """
        sources = self._resolve_sources(sources)
        outcomes = await self._fan_out(sources)

        stations: List[Station] = []
        contributed = 0
        for source_stations, _ in outcomes:
            if source_stations:
                contributed += 1
            stations.extend(source_stations)

        logger.info(
            f"Aggregated {len(stations)} stations from "
            f"{contributed}/{len(sources)} sources"
        )
        return stations

    async def collect_source_reports(self, sources: Optional[Iterable[Source]] = None) -> List[SourceReport]:
        """
        Run every source once and report how each one fared.

        Args:
            sources: Sources to query (defaults to the aggregator's own list)

        Returns:
            One SourceReport per source, in registry order
        """
        sources = self._resolve_sources(sources)
        outcomes = await self._fan_out(sources)

        return [
            SourceReport(
                name=source.name,
                url=source.url,
                enabled=source.enabled,
                stations=len(source_stations),
                error=error
            )
            for source, (source_stations, error) in zip(sources, outcomes)
        ]

    def _resolve_sources(self, sources: Optional[Iterable[Source]]) -> List[Source]:
        if sources is not None:
            return list(sources)
        if self.sources is not None:
            return list(self.sources)
        return get_sources()

    async def _fan_out(self, sources: List[Source]) -> List[SourceOutcome]:
        if not sources:
            logger.warning("No fuel sources registered")
            return []

        async with self.fetcher.create_client() as client:
            # Wait for all; cancelling this coroutine cancels every pending source
            results = await asyncio.gather(
                *(self._run_source(client, source) for source in sources),
                return_exceptions=True
            )

        outcomes: List[SourceOutcome] = []
        for source, result in zip(sources, results):
            if isinstance(result, BaseException):
                logger.error(f"Task for {source.name} did not complete: {result!r}")
                outcomes.append(([], repr(result)))
            else:
                outcomes.append(result)
        return outcomes

    async def _run_source(self, client: httpx.AsyncClient, source: Source) -> SourceOutcome:
        """Fetch and normalize one source inside its own failure boundary."""
        try:
            payload = await self.fetcher.fetch(source.url, client=client)
            stations = self.normalizer.normalize(payload, source.name)
            logger.debug(f"{source.name}: {len(stations)} stations")
            return stations, None
        except FeedError as e:
            logger.warning(f"Error fetching {source.name}: {e}")
            return [], str(e)
        except Exception as e:
            logger.error(f"Error processing {source.name}: {e}", exc_info=True)
            return [], f"{type(e).__name__}: {e}"


# Singleton instance
_aggregator = None

def get_aggregator() -> FuelPriceAggregator:
    """Get or create the aggregator singleton"""
    global _aggregator
    if _aggregator is None:
        _aggregator = FuelPriceAggregator()
    return _aggregator
