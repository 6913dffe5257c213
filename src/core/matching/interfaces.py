"""
Store interfaces consumed by the matching engine.

The engine only reads: one job lookup and two geo-filtered profile queries.
MongoDB implementations live in src.data.repositories; tests substitute
in-memory fakes.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.data.models import GeoPoint, Job, WorkerProfile


class JobStore(ABC):
    """Lookup of job postings by id."""

    @abstractmethod
    def get_job(self, job_id: str) -> Optional[Job]:
        """Return the job, or None if the id does not resolve."""
        pass

    @abstractmethod
    async def get_job_async(self, job_id: str) -> Optional[Job]:
        pass


class GeoProfileRepository(ABC):
    """Proximity queries over worker profiles."""

    @abstractmethod
    def find_candidates(
        self,
        skills: list[str],
        point: GeoPoint,
        max_distance_meters: float,
    ) -> list[WorkerProfile]:
        """
        Available profiles sharing at least one skill, within the radius.

        Args:
            skills: Skills required by the job
            point: Centre of the search
            max_distance_meters: Search radius

        Returns:
            Profiles in store retrieval order (nearest first for MongoDB)
        """
        pass

    @abstractmethod
    async def find_candidates_async(
        self,
        skills: list[str],
        point: GeoPoint,
        max_distance_meters: float,
    ) -> list[WorkerProfile]:
        pass

    @abstractmethod
    def find_comparable(
        self,
        skill: str,
        min_experience: float,
        max_experience: float,
        point: GeoPoint,
        max_distance_meters: float,
    ) -> list[WorkerProfile]:
        """
        Profiles with the skill and experience in [min, max], within the radius.

        Availability is not filtered: busy workers still set the market rate.
        """
        pass

    @abstractmethod
    async def find_comparable_async(
        self,
        skill: str,
        min_experience: float,
        max_experience: float,
        point: GeoPoint,
        max_distance_meters: float,
    ) -> list[WorkerProfile]:
        pass
