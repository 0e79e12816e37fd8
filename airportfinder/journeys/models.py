"""
Journey data models
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Coordinates(BaseModel):
    """Latitude/longitude pair for a journey origin"""

    lat: float = Field(description="Latitude")
    lon: float = Field(description="Longitude")

    def as_query(self) -> str:
        """Format as the "lat,lon" string the journey planner expects"""
        return f"{self.lat},{self.lon}"


class Destination(BaseModel):
    """Named destination with a journey planner location token"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name", min_length=1)
    location_token: str = Field(
        description="Coordinate pair or stop code understood by the journey planner",
        min_length=1
    )


class Leg(BaseModel):
    """One segment of an itinerary"""

    model_config = ConfigDict(populate_by_name=True)

    mode: str = Field(description="Normalized transport mode name")
    duration_minutes: int = Field(description="Leg duration in minutes")
    from_name: str = Field(alias="from", description="Departure point name")
    to_name: str = Field(alias="to", description="Arrival point name")
    instruction: Optional[str] = Field(None, description="Human readable instruction")
    path: List[Tuple[float, float]] = Field(
        default_factory=list,
        description="Polyline of (lat, lon) pairs"
    )


class JourneyResult(BaseModel):
    """
    Fastest journey to a single destination

    A result either holds a best itinerary (duration and legs), an error,
    or neither when the planner found no journey.
    """

    destination_name: str = Field(description="Destination display name")
    duration_minutes: Optional[int] = Field(None, description="Fastest journey time in minutes")
    summary: str = Field("", description="De-duplicated leg modes, e.g. 'Tube → Walk'")
    legs: Optional[List[Leg]] = Field(None, description="Legs of the fastest journey")
    error: Optional[str] = Field(None, description="Error message if the lookup failed")

    @model_validator(mode="after")
    def check_outcome(self) -> "JourneyResult":
        """Ensure a result cannot be partially successful"""
        if (self.duration_minutes is None) != (self.legs is None):
            raise ValueError("duration_minutes and legs must be set together")
        if self.error is not None and self.duration_minutes is not None:
            raise ValueError("a failed result cannot carry a journey")
        if self.duration_minutes is None and self.summary:
            raise ValueError("summary must be empty without a journey")
        return self

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def found_journey(self) -> bool:
        return self.duration_minutes is not None

    @classmethod
    def failed(cls, destination_name: str, error: str) -> "JourneyResult":
        """Create a result for a failed lookup"""
        return cls(destination_name=destination_name, error=error)
