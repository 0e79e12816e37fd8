"""
Journey service for ranking airports by public transport time
"""

import asyncio
import logging
from typing import Iterable, List, Optional, Sequence

import httpx

from .client import TflJourneyClient
from .destinations import DEFAULT_DESTINATIONS
from .geocoding import PostcodeClient
from .models import Coordinates, Destination, JourneyResult


class SearchError(Exception):
    """Search input error shown to the user"""
    pass


def sort_results(results: Iterable[JourneyResult]) -> List[JourneyResult]:
    """Order results fastest first, with failed and empty results last"""
    return sorted(
        results,
        key=lambda r: (r.duration_minutes is None, r.duration_minutes or 0)
    )


class JourneyService:
    """
    Fans out one journey query per destination and ranks the results
    """

    def __init__(
        self,
        journey_client: Optional[TflJourneyClient] = None,
        postcode_client: Optional[PostcodeClient] = None,
        destinations: Sequence[Destination] = DEFAULT_DESTINATIONS,
        http: Optional[httpx.AsyncClient] = None
    ):
        self.client = journey_client or TflJourneyClient()
        self.postcode_client = postcode_client or PostcodeClient()
        self.destinations = tuple(destinations)
        self.http = http
        self.logger = logging.getLogger(__name__)

    async def compute_journeys(
        self,
        origin: Coordinates,
        date: Optional[str] = None,
        time: Optional[str] = None
    ) -> List[JourneyResult]:
        """
        Find the fastest journey to every destination

        All destinations are queried concurrently and the call waits for
        every one of them. Cancelling the call cancels all queries.

        Args:
            origin: Journey origin
            date: Optional travel date, passed through to the planner
            time: Optional departure time, passed through to the planner

        Returns:
            One JourneyResult per destination, fastest first
        """
        if not self.destinations:
            return []

        self.logger.info(
            f"Querying {len(self.destinations)} destinations from {origin.as_query()}"
        )

        if self.http is not None:
            results = await self._gather(self.http, origin, date, time)
        else:
            async with self.client.session() as http:
                results = await self._gather(http, origin, date, time)

        failed = sum(1 for r in results if not r.succeeded)
        self.logger.info(f"Journey lookup finished: {len(results) - failed} ok, {failed} failed")

        return sort_results(results)

    async def _gather(
        self,
        http: httpx.AsyncClient,
        origin: Coordinates,
        date: Optional[str],
        time: Optional[str]
    ) -> List[JourneyResult]:
        tasks = [
            self.client.query_destination(http, origin, destination, date, time)
            for destination in self.destinations
        ]
        return list(await asyncio.gather(*tasks))

    async def search(
        self,
        postcode: Optional[str],
        date: Optional[str] = None,
        time: Optional[str] = None
    ) -> List[JourneyResult]:
        """
        Resolve a postcode and rank airports from it

        Raises:
            SearchError: If the postcode is blank or cannot be found
        """
        if not postcode or not postcode.strip():
            raise SearchError("Please enter a postcode.")

        origin = await self.postcode_client.geocode(postcode)
        if origin is None:
            raise SearchError(f"Could not find postcode '{postcode}'. Please check and try again.")

        return await self.compute_journeys(origin, date, time)
