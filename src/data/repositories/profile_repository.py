"""
Worker profile repository.

Implements the proximity queries behind matching and rate suggestions
with MongoDB's $near operator over the profiles' 2dsphere index.
"""

from typing import Any, Optional

from src.core.matching.interfaces import GeoProfileRepository
from src.data.models.base import GeoPoint
from src.data.models.profile import WorkerProfile
from src.utils.config import get_settings
from src.utils.logger import get_logger

from .base import BaseRepository

logger = get_logger(__name__)


def near(point: GeoPoint, max_distance_meters: float) -> dict[str, Any]:
    """$near clause; results come back nearest first."""
    return {
        "$near": {
            "$geometry": point.to_geojson(),
            "$maxDistance": max_distance_meters,
        }
    }


class ProfileRepository(BaseRepository[WorkerProfile], GeoProfileRepository):
    """Repository for worker profile documents."""

    @property
    def collection_name(self) -> str:
        return get_settings().database.profiles_collection

    @property
    def model_class(self) -> type[WorkerProfile]:
        return WorkerProfile

    # -------------------------------------------------------------------------
    # Query Builders
    # -------------------------------------------------------------------------

    @staticmethod
    def candidates_query(
        skills: list[str], point: GeoPoint, max_distance_meters: float
    ) -> dict[str, Any]:
        """Available workers with any of the skills, within the radius."""
        return {
            "skills": {"$in": list(skills)},
            "isAvailable": True,
            "location": near(point, max_distance_meters),
        }

    @staticmethod
    def comparable_query(
        skill: str,
        min_experience: float,
        max_experience: float,
        point: GeoPoint,
        max_distance_meters: float,
    ) -> dict[str, Any]:
        """Workers with the skill and similar experience, within the radius."""
        return {
            "skills": skill,
            "experienceYears": {"$gte": min_experience, "$lte": max_experience},
            "location": near(point, max_distance_meters),
        }

    # -------------------------------------------------------------------------
    # Query Operations
    # -------------------------------------------------------------------------

    def find_candidates(
        self,
        skills: list[str],
        point: GeoPoint,
        max_distance_meters: float,
    ) -> list[WorkerProfile]:
        if not skills:
            return []
        return self.find(self.candidates_query(skills, point, max_distance_meters))

    async def find_candidates_async(
        self,
        skills: list[str],
        point: GeoPoint,
        max_distance_meters: float,
    ) -> list[WorkerProfile]:
        if not skills:
            return []
        return await self.find_async(
            self.candidates_query(skills, point, max_distance_meters)
        )

    def find_comparable(
        self,
        skill: str,
        min_experience: float,
        max_experience: float,
        point: GeoPoint,
        max_distance_meters: float,
    ) -> list[WorkerProfile]:
        return self.find(
            self.comparable_query(
                skill, min_experience, max_experience, point, max_distance_meters
            )
        )

    async def find_comparable_async(
        self,
        skill: str,
        min_experience: float,
        max_experience: float,
        point: GeoPoint,
        max_distance_meters: float,
    ) -> list[WorkerProfile]:
        return await self.find_async(
            self.comparable_query(
                skill, min_experience, max_experience, point, max_distance_meters
            )
        )


# Singleton instance
_profile_repository: Optional[ProfileRepository] = None


def get_profile_repository() -> ProfileRepository:
    """Get the profile repository singleton instance."""
    global _profile_repository
    if _profile_repository is None:
        _profile_repository = ProfileRepository()
    return _profile_repository
