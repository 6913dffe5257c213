"""
Job repository.

Looks up job postings for the matching engine.
"""

from typing import Optional

from src.core.matching.interfaces import JobStore
from src.data.models.job import Job
from src.utils.config import get_settings

from .base import BaseRepository


class JobRepository(BaseRepository[Job], JobStore):
    """Repository for job posting documents."""

    @property
    def collection_name(self) -> str:
        return get_settings().database.jobs_collection

    @property
    def model_class(self) -> type[Job]:
        return Job

    def get_job(self, job_id: str) -> Optional[Job]:
        return self.get_by_id(job_id)

    async def get_job_async(self, job_id: str) -> Optional[Job]:
        return await self.get_by_id_async(job_id)


# Singleton instance
_job_repository: Optional[JobRepository] = None


def get_job_repository() -> JobRepository:
    """Get the job repository singleton instance."""
    global _job_repository
    if _job_repository is None:
        _job_repository = JobRepository()
    return _job_repository
