"""
Match and rate suggestion result models.

These are computed per request and never persisted.
"""

from pydantic import Field

from src.utils.constants import MATCH_WEIGHTS, DemandLevel

from .base import EmbeddedModel
from .profile import WorkerProfile


class MatchFactors(EmbeddedModel):
    """Per-factor scores, each on a 0-100 scale."""

    skill_match: float = Field(default=0.0, ge=0, le=100)
    distance_score: float = Field(default=0.0, ge=0, le=100)
    rate_score: float = Field(default=0.0, ge=0, le=100)
    availability_score: float = Field(default=0.0, ge=0, le=100)
    experience_score: float = Field(default=0.0, ge=0, le=100)
    rating_score: float = Field(default=0.0, ge=0, le=100)

    def weighted_sum(self, weights: dict[str, float] = MATCH_WEIGHTS) -> float:
        """Sum of factor scores multiplied by their weights."""
        return sum(getattr(self, name) * weight for name, weight in weights.items())


class MatchResult(EmbeddedModel):
    """A ranked candidate for a job."""

    worker_id: str
    profile: WorkerProfile
    total: int = Field(ge=0, le=100)
    factors: MatchFactors
    distance_meters: float = Field(default=0.0, ge=0)


class SuggestedRates(EmbeddedModel):
    """Rates a worker is advised to charge."""

    hourly: int
    daily: int
    project: int


class MarketRate(EmbeddedModel):
    """Hourly-equivalent spread of comparable workers' rates."""

    min: float
    max: float
    avg: float


class RateFactors(EmbeddedModel):
    """Inputs echoed back with the derived demand level."""

    skill: str
    experience: int
    location: str
    demand: DemandLevel


class RateSuggestion(EmbeddedModel):
    """Suggested rates together with the market they were derived from."""

    suggested: SuggestedRates
    market: MarketRate
    factors: RateFactors
