"""
Job posting data models.

Defines the parts of a customer's job posting that the matching engine reads:
required skills, site location, pay and start date.
"""

import math
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from src.utils.constants import WEEKDAYS, JobStatus, PayType, Urgency

from .base import BaseDocument, EmbeddedModel, GeoPoint


class JobPay(EmbeddedModel):
    """Pay offered for the job."""

    amount: float
    type: PayType = PayType.DAILY
    currency: str = "INR"

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: float) -> float:
        """Pay must be a finite, non-negative amount."""
        if not math.isfinite(v) or v < 0:
            raise ValueError("Pay amount must be a finite non-negative number")
        return v


class JobDuration(EmbeddedModel):
    """Expected duration of the job."""

    value: int = Field(default=1, ge=1)
    unit: str = "days"  # hours, days, weeks, months


class Job(BaseDocument):
    """
    Job posting document.

    Represents a customer's request for one or more trades at a site.
    """

    contractor_id: Optional[str] = None
    title: str = ""
    description: str = ""
    skills: list[str] = Field(default_factory=list)
    location: GeoPoint
    start_date: datetime
    end_date: Optional[datetime] = None
    duration: Optional[JobDuration] = None
    pay: JobPay
    status: JobStatus = JobStatus.ACTIVE
    urgency: Urgency = Urgency.MEDIUM

    @field_validator("skills")
    @classmethod
    def strip_skills(cls, v: list[str]) -> list[str]:
        """Drop blank entries and surrounding whitespace."""
        return [s.strip() for s in v if s and s.strip()]

    @property
    def skill_set(self) -> set[str]:
        return set(self.skills)

    @property
    def start_weekday(self) -> str:
        """Lowercase weekday name of the start date."""
        return WEEKDAYS[self.start_date.weekday()]

    class Settings:
        """MongoDB collection settings."""

        name = "jobs"
        indexes = [
            "contractorId",
            "skills",
            "status",
            "startDate",
            "createdAt",
        ]
        geo_indexes = ["location"]
