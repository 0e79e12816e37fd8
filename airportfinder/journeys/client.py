"""
TfL journey planner client
Queries one destination at a time and reduces the response to its fastest itinerary
"""

import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

import httpx

from .models import Coordinates, Destination, JourneyResult, Leg

SUMMARY_SEPARATOR = " → "


def normalize_mode(name: str) -> str:
    """Capitalize a mode name and turn hyphens into spaces ("night-bus" -> "Night bus")"""
    return (name[:1].upper() + name[1:]).replace("-", " ")


def select_fastest_journey(journeys: Iterable[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Pick the journey with the smallest duration

    Only a strictly shorter journey replaces the current best, so the first
    of several equally fast journeys wins.

    Returns:
        The fastest journey, or None if there are no journeys
    """
    best = None
    best_duration = None

    for journey in journeys:
        duration = journey["duration"]
        if best_duration is None or duration < best_duration:
            best = journey
            best_duration = duration

    return best


def build_summary(modes: Iterable[str]) -> str:
    """Join modes in first-seen order, dropping repeats"""
    return SUMMARY_SEPARATOR.join(dict.fromkeys(modes))


def decode_path(line_string: str) -> List[Tuple[float, float]]:
    """Decode a TfL lineString ("[[lat, lon], ...]") into coordinate pairs"""
    points = json.loads(line_string)
    return [(float(point[0]), float(point[1])) for point in points]


class TflJourneyClient:
    """
    Async client for the TfL Unified API journey planner

    The HTTP session is opened by the caller and shared by all queries
    of a batch; the client itself holds no per-request state.
    """

    def __init__(
        self,
        app_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.app_key = app_key or os.getenv("TFL_APP_KEY")
        self.base_url = (base_url or os.getenv("TFL_API_BASE") or "https://api.tfl.gov.uk").rstrip("/")
        self.timeout = timeout if timeout is not None else float(os.getenv("AIRPORTFINDER_TIMEOUT", "30"))
        self.logger = logging.getLogger(__name__)

    def session(self) -> httpx.AsyncClient:
        """Create an HTTP session for a batch of queries"""
        return httpx.AsyncClient(timeout=self.timeout)

    def journey_url(self, origin: Coordinates, destination: Destination) -> str:
        """Journey planner URL from origin to destination"""
        token = quote(destination.location_token, safe=",")
        return f"{self.base_url}/Journey/JourneyResults/{origin.as_query()}/to/{token}"

    def build_params(self, date: Optional[str] = None, time: Optional[str] = None) -> Dict[str, str]:
        """
        Build query parameters

        Date and time are passed through unchanged. A time always means
        departing at that time, never arriving by it.
        """
        params = {}
        if self.app_key:
            params["app_key"] = self.app_key
        if date is not None:
            params["date"] = date
        if time is not None:
            params["time"] = time
            params["timeIs"] = "Departing"
        return params

    async def query_destination(
        self,
        http: httpx.AsyncClient,
        origin: Coordinates,
        destination: Destination,
        date: Optional[str] = None,
        time: Optional[str] = None
    ) -> JourneyResult:
        """
        Find the fastest journey to a single destination

        Args:
            http: Shared HTTP session
            origin: Journey origin
            destination: Destination to query
            date: Optional travel date, passed through to the planner
            time: Optional departure time, passed through to the planner

        Returns:
            JourneyResult; failures are reported in its error field, never raised
        """
        try:
            response = await http.get(
                self.journey_url(origin, destination),
                params=self.build_params(date, time)
            )

            if not response.is_success:
                self.logger.warning(
                    f"Journey planner returned {response.status_code} for {destination.name}"
                )
                return JourneyResult.failed(
                    destination.name, f"provider returned status {response.status_code}"
                )

            data = response.json()
            best = select_fastest_journey(data["journeys"])

            if best is None:
                self.logger.info(f"No journeys found to {destination.name}")
                return JourneyResult(destination_name=destination.name)

            legs = [self.parse_leg(leg) for leg in best["legs"]]

            return JourneyResult(
                destination_name=destination.name,
                duration_minutes=int(best["duration"]),
                summary=build_summary(leg.mode for leg in legs),
                legs=legs
            )

        except Exception as e:
            self.logger.warning(f"Error querying journey to {destination.name}: {e}")
            return JourneyResult.failed(destination.name, f"error: {e}")

    def parse_leg(self, leg: Dict[str, Any]) -> Leg:
        """Normalize a raw TfL leg; missing required fields raise"""
        instruction = leg.get("instruction") or {}

        return Leg(
            mode=normalize_mode(leg["mode"]["name"] or ""),
            duration_minutes=int(leg["duration"]),
            from_name=leg["departurePoint"]["commonName"] or "",
            to_name=leg["arrivalPoint"]["commonName"] or "",
            instruction=instruction.get("summary"),
            path=self.parse_path(leg)
        )

    def parse_path(self, leg: Dict[str, Any]) -> List[Tuple[float, float]]:
        """Decode a leg's path geometry, returning [] if it is missing or malformed"""
        line_string = None
        try:
            line_string = (leg.get("path") or {}).get("lineString")
            if line_string is None:
                return []
            return decode_path(line_string)
        except Exception as e:
            self.logger.warning(f"Failed to parse path lineString {line_string!r}: {e}")
            return []
