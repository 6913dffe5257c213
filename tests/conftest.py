"""
Shared test fixtures for the Labour Chowk test suite.

Sets environment variables before any src imports to prevent config failures,
then provides factory fixtures for jobs and profiles and in-memory stores
implementing the matching engine's store interfaces.
"""

import math
import os

# === Set environment BEFORE any src imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DB_NAME", "labour_chowk_test")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime
from typing import Any, Optional

import pytest
from bson import ObjectId

from src.core.exceptions import UpstreamFailureError
from src.core.matching import MatchingEngine, MatchingService, RateAdvisor
from src.core.matching.geo import haversine_distance
from src.core.matching.interfaces import GeoProfileRepository, JobStore
from src.data.models import (
    DayAvailability,
    GeoPoint,
    Job,
    JobPay,
    ProfileRating,
    RateCard,
    WeeklyAvailability,
    WorkerProfile,
)
from src.utils.constants import EARTH_RADIUS_METERS


# Connaught Place, New Delhi
DELHI = (77.2167, 28.6315)

# A Monday
MONDAY_START = datetime(2026, 11, 2, 9, 0)


def offset_north(coordinates: tuple[float, float], meters: float) -> tuple[float, float]:
    """Point `meters` due north of `coordinates`."""
    lng, lat = coordinates
    return (lng, lat + math.degrees(meters / EARTH_RADIUS_METERS))


# ---------------------------------------------------------------------------
# In-memory stores
# ---------------------------------------------------------------------------


class FakeJobStore(JobStore):
    """Jobs keyed by string id."""

    def __init__(self, jobs: Optional[dict[str, Job]] = None):
        self.jobs = jobs or {}
        self.error: Optional[Exception] = None

    def get_job(self, job_id: str) -> Optional[Job]:
        if self.error:
            raise self.error
        return self.jobs.get(job_id)

    async def get_job_async(self, job_id: str) -> Optional[Job]:
        return self.get_job(job_id)


class FakeProfileStore(GeoProfileRepository):
    """
    Filters profiles the way the MongoDB queries do.

    Results are nearest first, like $near.
    """

    def __init__(self, profiles: Optional[list[WorkerProfile]] = None):
        self.profiles = profiles or []
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.error: Optional[Exception] = None

    def _within(self, point: GeoPoint, max_distance_meters: float) -> list[WorkerProfile]:
        ranked = [
            (haversine_distance(point.coordinates, p.location.coordinates), p)
            for p in self.profiles
        ]
        ranked = [(d, p) for d, p in ranked if d <= max_distance_meters]
        ranked.sort(key=lambda pair: pair[0])
        return [p for _, p in ranked]

    def find_candidates(self, skills, point, max_distance_meters):
        self.calls.append((
            "find_candidates",
            {"skills": list(skills), "point": point, "max_distance_meters": max_distance_meters},
        ))
        if self.error:
            raise self.error
        wanted = set(skills)
        return [
            p for p in self._within(point, max_distance_meters)
            if p.is_available and wanted & p.skill_set
        ]

    async def find_candidates_async(self, skills, point, max_distance_meters):
        return self.find_candidates(skills, point, max_distance_meters)

    def find_comparable(self, skill, min_experience, max_experience, point, max_distance_meters):
        self.calls.append((
            "find_comparable",
            {
                "skill": skill,
                "min_experience": min_experience,
                "max_experience": max_experience,
                "point": point,
                "max_distance_meters": max_distance_meters,
            },
        ))
        if self.error:
            raise self.error
        return [
            p for p in self._within(point, max_distance_meters)
            if skill in p.skill_set and min_experience <= p.experience_years <= max_experience
        ]

    async def find_comparable_async(self, skill, min_experience, max_experience, point, max_distance_meters):
        return self.find_comparable(skill, min_experience, max_experience, point, max_distance_meters)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_job():
    """Factory that returns a callable to build Job documents."""

    def _factory(
        skills: Optional[list[str]] = None,
        pay_amount: float = 700,
        pay_type: str = "daily",
        coordinates: tuple[float, float] = DELHI,
        start_date: datetime = MONDAY_START,
        **kwargs,
    ) -> Job:
        return Job(
            id=kwargs.pop("id", ObjectId()),
            title=kwargs.pop("title", "Fix kitchen sink"),
            skills=["Plumber"] if skills is None else skills,
            location=GeoPoint(coordinates=coordinates, city="New Delhi"),
            start_date=start_date,
            pay=JobPay(amount=pay_amount, type=pay_type),
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_profile():
    """Factory that returns a callable to build WorkerProfile documents."""

    def _factory(
        user_id: str = "worker-1",
        skills: Optional[list[str]] = None,
        coordinates: tuple[float, float] = DELHI,
        hourly: float = 100,
        daily: float = 700,
        experience_years: float = 10,
        rating_avg: float = 5.0,
        available_days: Optional[dict[str, bool]] = None,
        is_available: bool = True,
        **kwargs,
    ) -> WorkerProfile:
        availability = WeeklyAvailability(**{
            day: DayAvailability(available=flag)
            for day, flag in (available_days or {}).items()
        })
        return WorkerProfile(
            id=ObjectId(),
            user_id=user_id,
            name=kwargs.pop("name", f"Worker {user_id}"),
            skills=["Plumber"] if skills is None else skills,
            location=GeoPoint(coordinates=coordinates),
            rate=RateCard(hourly=hourly, daily=daily),
            availability=availability,
            experience_years=experience_years,
            rating=ProfileRating(avg=rating_avg, count=kwargs.pop("rating_count", 12)),
            is_available=is_available,
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_profile_document():
    """Raw camelCase profile document, as the web application stores it."""

    def _factory(**overrides: Any) -> dict[str, Any]:
        document = {
            "_id": ObjectId(),
            "userId": "worker-1",
            "name": "Ramesh Kumar",
            "contactPhone": "+919876543210",
            "skills": ["Plumber", "Handyman"],
            "experienceYears": 6,
            "location": {"type": "Point", "coordinates": list(DELHI), "city": "New Delhi"},
            "rate": {"hourly": 120, "daily": 700, "currency": "INR"},
            "availability": {
                "monday": {"available": True, "slots": ["morning", "afternoon"]},
                "sunday": {"available": False, "slots": []},
            },
            "rating": {"avg": 4.2, "count": 17, "reviews": []},
            "isAvailable": True,
        }
        document.update(overrides)
        return document

    return _factory


# ---------------------------------------------------------------------------
# Stores and engines
# ---------------------------------------------------------------------------


@pytest.fixture
def job_store():
    return FakeJobStore()


@pytest.fixture
def profile_store():
    return FakeProfileStore()


@pytest.fixture
def matching_engine(job_store, profile_store):
    """MatchingEngine over in-memory stores."""
    return MatchingEngine(job_store, profile_store)


@pytest.fixture
def rate_advisor(profile_store):
    return RateAdvisor(profile_store)


@pytest.fixture
def matching_service(job_store, profile_store):
    return MatchingService(job_store, profile_store)


@pytest.fixture
def upstream_error():
    return UpstreamFailureError("profiles.find failed: connection reset")
