"""
Journey planning: destination registry, TfL client and aggregation service
"""

from .client import TflJourneyClient
from .destinations import DEFAULT_DESTINATIONS, DestinationConfigError, load_destinations
from .geocoding import PostcodeClient
from .models import Coordinates, Destination, JourneyResult, Leg
from .service import JourneyService, SearchError, sort_results

__all__ = [
    "TflJourneyClient",
    "PostcodeClient",
    "JourneyService",
    "SearchError",
    "sort_results",
    "DEFAULT_DESTINATIONS",
    "DestinationConfigError",
    "load_destinations",
    "Coordinates",
    "Destination",
    "JourneyResult",
    "Leg",
]
