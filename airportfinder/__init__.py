"""
AirportFinder: fastest public transport journeys to London's airports

Resolves a postcode, asks the TfL journey planner for routes to each
airport and ranks the airports by their fastest journey.
"""

__version__ = "0.1.0"

from .journeys import Coordinates, Destination, JourneyResult, JourneyService, Leg

__all__ = [
    "JourneyService",
    "JourneyResult",
    "Leg",
    "Destination",
    "Coordinates",
]
