"""
Worker-job matching engine.

Scores and ranks nearby worker profiles against a job using six weighted
factors: skills, distance, rate, availability, experience and rating.
"""

import math
from typing import Optional

from src.core.exceptions import InvalidArgumentError, NotFoundError
from src.data.models import Job, MatchFactors, MatchResult, WorkerProfile
from src.utils.constants import (
    DISTANCE_PENALTY_PER_KM,
    EXPERIENCE_POINTS_PER_YEAR,
    MATCH_RADIUS_METERS,
    MATCH_WEIGHTS,
    MAX_FACTOR_SCORE,
    MAX_RATING,
)
from src.utils.logger import get_logger

from .geo import haversine_distance
from .interfaces import GeoProfileRepository, JobStore

logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values, unlike round()."""
    return math.floor(value + 0.5)


def clamp_score(value: float) -> float:
    """Clamp a factor score to [0, 100]."""
    return max(0.0, min(MAX_FACTOR_SCORE, value))


class MatchingEngine:
    """
    Engine for ranking workers against a job.

    Factor weights:
    - Skills overlap (40%)
    - Distance, 2 points lost per km (20%)
    - Rate closeness to the offered pay (15%)
    - Availability on the start weekday (10%)
    - Experience, 10 points per year (10%)
    - Customer rating (5%)
    """

    def __init__(
        self,
        jobs: JobStore,
        profiles: GeoProfileRepository,
        weights: Optional[dict[str, float]] = None,
    ):
        """
        Initialize the matching engine.

        Args:
            jobs: Job lookup
            profiles: Proximity queries over worker profiles
            weights: Optional custom factor weights (must sum to 1.0)
        """
        self._jobs = jobs
        self._profiles = profiles
        self.weights = weights or MATCH_WEIGHTS

        if set(self.weights) != set(MATCH_WEIGHTS):
            raise ValueError(
                f"Match weights must name exactly the factors {sorted(MATCH_WEIGHTS)}, "
                f"got {sorted(self.weights)}"
            )
        if not math.isclose(sum(self.weights.values()), 1.0):
            raise ValueError(f"Match weights must sum to 1.0, got {sum(self.weights.values())}")

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def find_matches(self, job_id: str, limit: int = 10) -> list[MatchResult]:
        """
        Find the best-scoring workers for a job.

        Args:
            job_id: Id of the job posting
            limit: Maximum number of results

        Returns:
            Results sorted by total score, highest first

        Raises:
            NotFoundError: If the job does not exist
            InvalidArgumentError: If the job's pay amount is not positive
        """
        self._check_limit(limit)
        job = self._jobs.get_job(job_id)
        if job is None:
            raise NotFoundError("Job", job_id)
        self._check_pay(job)

        candidates = self._profiles.find_candidates(
            job.skills, job.location, MATCH_RADIUS_METERS
        )
        return self._rank_candidates(job, candidates, limit)

    async def find_matches_async(self, job_id: str, limit: int = 10) -> list[MatchResult]:
        """Async variant of find_matches."""
        self._check_limit(limit)
        job = await self._jobs.get_job_async(job_id)
        if job is None:
            raise NotFoundError("Job", job_id)
        self._check_pay(job)

        candidates = await self._profiles.find_candidates_async(
            job.skills, job.location, MATCH_RADIUS_METERS
        )
        return self._rank_candidates(job, candidates, limit)

    def score(self, job: Job, profile: WorkerProfile) -> MatchResult:
        """Score a single profile against a job."""
        distance = haversine_distance(job.location.coordinates, profile.location.coordinates)

        factors = MatchFactors(
            skill_match=self._skill_score(job, profile),
            distance_score=self._distance_score(distance),
            rate_score=self._rate_score(job, profile),
            availability_score=self._availability_score(job, profile),
            experience_score=self._experience_score(profile),
            rating_score=self._rating_score(profile),
        )

        total = round_half_up(factors.weighted_sum(self.weights))

        return MatchResult(
            worker_id=profile.user_id,
            profile=profile.model_copy(deep=True),
            total=max(0, min(100, total)),
            factors=factors,
            distance_meters=distance,
        )

    def rank(self, results: list[MatchResult]) -> list[MatchResult]:
        """
        Sort results by total score, highest first.

        Equal totals are ordered by worker id so rankings are reproducible.
        """
        return sorted(results, key=lambda r: (-r.total, r.worker_id))

    # -------------------------------------------------------------------------
    # Ranking
    # -------------------------------------------------------------------------

    def _rank_candidates(
        self, job: Job, candidates: list[WorkerProfile], limit: int
    ) -> list[MatchResult]:
        logger.debug(f"Scoring {len(candidates)} candidates for job {job.id}")

        results = self.rank([self.score(job, profile) for profile in candidates])[:limit]

        if results:
            logger.debug(
                f"Top match for job {job.id}: worker {results[0].worker_id} "
                f"scored {results[0].total}"
            )
        return results

    @staticmethod
    def _check_limit(limit: int) -> None:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise InvalidArgumentError(f"Limit must be a positive integer, got {limit!r}")

    @staticmethod
    def _check_pay(job: Job) -> None:
        if not job.pay.amount > 0:
            raise InvalidArgumentError(
                f"Job {job.id} has pay amount {job.pay.amount}; rate score needs a positive amount"
            )

    # -------------------------------------------------------------------------
    # Factor Scores
    # -------------------------------------------------------------------------

    def _skill_score(self, job: Job, profile: WorkerProfile) -> float:
        """Share of the job's skills the worker has."""
        job_skills = job.skill_set
        if not job_skills:
            return 0.0
        common = job_skills & profile.skill_set
        return clamp_score(len(common) / len(job_skills) * 100)

    def _distance_score(self, distance_meters: float) -> float:
        return clamp_score(100 - (distance_meters / 1000) * DISTANCE_PENALTY_PER_KM)

    def _rate_score(self, job: Job, profile: WorkerProfile) -> float:
        """Relative closeness of the worker's rate to the offered pay."""
        self._check_pay(job)
        job_rate = job.pay.amount
        profile_rate = profile.rate.for_pay_type(job.pay.type)
        rate_diff = abs(job_rate - profile_rate) / job_rate
        return clamp_score(100 - rate_diff * 100)

    def _availability_score(self, job: Job, profile: WorkerProfile) -> float:
        return MAX_FACTOR_SCORE if profile.availability.is_available_on(job.start_weekday) else 0.0

    def _experience_score(self, profile: WorkerProfile) -> float:
        return clamp_score(profile.experience_years * EXPERIENCE_POINTS_PER_YEAR)

    def _rating_score(self, profile: WorkerProfile) -> float:
        return clamp_score(profile.rating.avg / MAX_RATING * 100)
