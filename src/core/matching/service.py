"""
Matching service facade.

Validates raw caller input, then delegates to the matching engine and the
rate advisor. Stateless: one instance can serve any number of callers.
"""

from typing import Optional, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from src.core.exceptions import InvalidArgumentError
from src.data.models import MatchRequest, MatchResult, RateSuggestion, RateSuggestionRequest

from .interfaces import GeoProfileRepository, JobStore
from .matching_engine import MatchingEngine
from .rate_advisor import RateAdvisor

R = TypeVar("R", bound=BaseModel)


def parse_request(schema: type[R], **values) -> R:
    """Build a request schema, reporting validation failures as InvalidArgumentError."""
    try:
        return schema(**values)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidArgumentError(messages) from e


class MatchingService:
    """Worker-job matching and rate suggestions over a profile store."""

    def __init__(self, jobs: JobStore, profiles: GeoProfileRepository):
        self.engine = MatchingEngine(jobs, profiles)
        self.advisor = RateAdvisor(profiles)

    def find_matches(self, job_id: str, limit: int = 10) -> list[MatchResult]:
        """Top `limit` workers for a job, best first."""
        request = parse_request(MatchRequest, job_id=job_id, limit=limit)
        return self.engine.find_matches(request.job_id, request.limit)

    async def find_matches_async(self, job_id: str, limit: int = 10) -> list[MatchResult]:
        request = parse_request(MatchRequest, job_id=job_id, limit=limit)
        return await self.engine.find_matches_async(request.job_id, request.limit)

    def suggest_rates(
        self,
        skill: str,
        experience_years: int,
        location: Sequence[float],
    ) -> RateSuggestion:
        """Suggested rates for a skill and experience at [longitude, latitude]."""
        request = parse_request(
            RateSuggestionRequest,
            skill=skill,
            experience_years=experience_years,
            location=location,
        )
        return self.advisor.suggest_rates(request)

    async def suggest_rates_async(
        self,
        skill: str,
        experience_years: int,
        location: Sequence[float],
    ) -> RateSuggestion:
        request = parse_request(
            RateSuggestionRequest,
            skill=skill,
            experience_years=experience_years,
            location=location,
        )
        return await self.advisor.suggest_rates_async(request)


# Singleton instance
_matching_service: Optional[MatchingService] = None


def get_matching_service() -> MatchingService:
    """Get the matching service singleton, backed by the MongoDB repositories."""
    global _matching_service
    if _matching_service is None:
        from src.data.repositories import get_job_repository, get_profile_repository

        _matching_service = MatchingService(get_job_repository(), get_profile_repository())
    return _matching_service
