"""
Validated request schemas for the matching operations.

Callers (HTTP handlers, the CLI) pass raw values; these schemas reject
malformed input before any store query is issued.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator

# Numbers only: no bools, no numeric strings
Coordinate = StrictFloat | StrictInt


class MatchRequest(BaseModel):
    """Schema for finding matches for a job."""

    model_config = ConfigDict(str_strip_whitespace=True)

    job_id: str = Field(..., min_length=1)
    limit: StrictInt = Field(default=10, gt=0)


class RateSuggestionRequest(BaseModel):
    """Schema for a rate suggestion."""

    model_config = ConfigDict(str_strip_whitespace=True)

    skill: str = Field(..., min_length=1)
    experience_years: StrictInt = Field(..., ge=0)
    location: tuple[Coordinate, Coordinate]

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: tuple[float, float]) -> tuple[float, float]:
        """[longitude, latitude], finite and within range."""
        if any(isinstance(c, bool) for c in v):
            raise ValueError("Location must contain numbers, not booleans")
        lng, lat = float(v[0]), float(v[1])
        if not (math.isfinite(lng) and math.isfinite(lat)):
            raise ValueError("Location must contain finite numbers")
        if not -180 <= lng <= 180:
            raise ValueError(f"Longitude out of range: {lng}")
        if not -90 <= lat <= 90:
            raise ValueError(f"Latitude out of range: {lat}")
        return lng, lat
