"""
Search options for CLI commands
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SearchOptions(BaseModel):
    """Validated input for an airport search"""

    postcode: str = Field(..., description="UK postcode to travel from", min_length=2)
    date: Optional[str] = Field(None, description="Travel date (YYYYMMDD)")
    time: Optional[str] = Field(None, description="Departure time (HHMM)")
    destinations_file: Optional[Path] = Field(
        None,
        description="YAML or JSON file overriding the built-in airports"
    )

    @field_validator('postcode')
    def validate_postcode(cls, v):
        """Reject blank postcodes"""
        if not v.strip():
            raise ValueError("Please enter a postcode.")
        return v.strip()

    @field_validator('date')
    def validate_date(cls, v):
        """Validate travel date format"""
        if v is not None:
            try:
                datetime.strptime(v, "%Y%m%d")
            except ValueError:
                raise ValueError("Date must be in YYYYMMDD format (e.g., 20240315)")
        return v

    @field_validator('time')
    def validate_time(cls, v):
        """Validate departure time format"""
        if v is not None:
            if len(v) != 4 or not v.isdigit():
                raise ValueError("Time must be in HHMM format (e.g., 0830)")
            hour, minute = int(v[:2]), int(v[2:])
            if not (0 <= hour <= 23 and 0 <= minute <= 59):
                raise ValueError("Time must be in HHMM format (e.g., 0830)")
        return v
