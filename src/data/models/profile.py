"""
Worker profile data models.

A profile is a worker's skills, rates, weekly availability and location,
maintained by the worker through the marketplace application.
"""

from typing import Optional

from pydantic import Field, field_validator

from src.utils.constants import WEEKDAYS, TimeSlot

from .base import BaseDocument, EmbeddedModel, GeoPoint


class RateCard(EmbeddedModel):
    """Rates a worker charges."""

    hourly: float = Field(default=0, ge=0)
    daily: float = Field(default=0, ge=0)
    project: Optional[float] = Field(default=None, ge=0)
    currency: str = "INR"

    def for_pay_type(self, pay_type: str) -> float:
        """Rate comparable to a job's pay; only hourly pay uses the hourly rate."""
        return self.hourly if pay_type == "hourly" else self.daily


class DayAvailability(EmbeddedModel):
    """Availability for a single weekday."""

    available: bool = True
    slots: list[TimeSlot] = Field(default_factory=list)


class WeeklyAvailability(EmbeddedModel):
    """Availability for each day of the week."""

    monday: DayAvailability = Field(default_factory=DayAvailability)
    tuesday: DayAvailability = Field(default_factory=DayAvailability)
    wednesday: DayAvailability = Field(default_factory=DayAvailability)
    thursday: DayAvailability = Field(default_factory=DayAvailability)
    friday: DayAvailability = Field(default_factory=DayAvailability)
    saturday: DayAvailability = Field(default_factory=DayAvailability)
    sunday: DayAvailability = Field(default_factory=lambda: DayAvailability(available=False))

    def for_day(self, day: str) -> Optional[DayAvailability]:
        """Entry for a lowercase weekday name, or None for unknown names."""
        if day not in WEEKDAYS:
            return None
        return getattr(self, day)

    def is_available_on(self, day: str) -> bool:
        entry = self.for_day(day)
        return bool(entry and entry.available)


class ProfileRating(EmbeddedModel):
    """Aggregate customer rating."""

    avg: float = Field(default=0.0, ge=0, le=5)
    count: int = Field(default=0, ge=0)


class WorkerProfile(BaseDocument):
    """
    Worker profile document.

    Only the fields the matching engine reads are typed; anything else the
    web application stores on the document is ignored.
    """

    user_id: str
    name: str = Field(default="", max_length=100)
    skills: list[str] = Field(default_factory=list)
    experience_years: float = Field(default=0, ge=0, le=50)
    location: GeoPoint
    rate: RateCard = Field(default_factory=RateCard)
    availability: WeeklyAvailability = Field(default_factory=WeeklyAvailability)
    rating: ProfileRating = Field(default_factory=ProfileRating)
    languages: list[str] = Field(default_factory=list)
    bio: Optional[str] = Field(default=None, max_length=500)
    is_available: bool = True

    @field_validator("skills")
    @classmethod
    def strip_skills(cls, v: list[str]) -> list[str]:
        """Drop blank entries and surrounding whitespace."""
        return [s.strip() for s in v if s and s.strip()]

    @property
    def skill_set(self) -> set[str]:
        return set(self.skills)

    class Settings:
        """MongoDB collection settings."""

        name = "profiles"
        indexes = [
            "userId",
            "skills",
            "experienceYears",
            "isAvailable",
            "rating.avg",
            "rate.hourly",
            "rate.daily",
        ]
        geo_indexes = ["location"]
