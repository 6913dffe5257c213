"""
Rate suggestion engine.

Suggests what a worker should charge from the rates of comparable workers
nearby (same skill, similar experience), falling back to a fixed table of
base rates where there are none.
"""

from statistics import fmean
from typing import Optional

from src.data.models import (
    GeoPoint,
    MarketRate,
    RateFactors,
    RateSuggestion,
    RateSuggestionRequest,
    SuggestedRates,
    WorkerProfile,
)
from src.utils.constants import (
    DEFAULT_LOCATION_LABEL,
    DEFAULT_MARKET_MAX_FACTOR,
    DEFAULT_MARKET_MIN_FACTOR,
    DEFAULT_RATES,
    EXPERIENCE_RATE_STEP,
    EXPERIENCE_WINDOW_YEARS,
    FALLBACK_RATE,
    HOURS_PER_DAY,
    MARKET_LOCATION_LABEL,
    PROJECT_DAYS,
    RATE_RADIUS_METERS,
    DemandLevel,
)
from src.utils.logger import get_logger

from .interfaces import GeoProfileRepository
from .matching_engine import round_half_up

logger = get_logger(__name__)


def experience_multiplier(experience_years: int) -> float:
    """5% on top of the base rate per year of experience."""
    return 1 + experience_years * EXPERIENCE_RATE_STEP


def default_base_rates(skill: str) -> dict[str, int]:
    """
    Base hourly/daily rates for a skill, or the generic fallback.

    Skill names match exactly, as the comparable-profile query does.
    """
    return DEFAULT_RATES.get(skill, FALLBACK_RATE)


class RateAdvisor:
    """Suggests hourly, daily and project rates for a worker."""

    def __init__(self, profiles: GeoProfileRepository):
        self._profiles = profiles

    def suggest_rates(self, request: RateSuggestionRequest) -> RateSuggestion:
        """
        Suggest rates for a skill and experience level at a location.

        Args:
            request: Validated skill, experience and [longitude, latitude]

        Returns:
            Suggested rates with the market spread and demand level
        """
        min_exp, max_exp, point = self._comparable_window(request)
        profiles = self._profiles.find_comparable(
            request.skill, min_exp, max_exp, point, RATE_RADIUS_METERS
        )
        return self.build_suggestion(request.skill, request.experience_years, profiles)

    async def suggest_rates_async(self, request: RateSuggestionRequest) -> RateSuggestion:
        """Async variant of suggest_rates."""
        min_exp, max_exp, point = self._comparable_window(request)
        profiles = await self._profiles.find_comparable_async(
            request.skill, min_exp, max_exp, point, RATE_RADIUS_METERS
        )
        return self.build_suggestion(request.skill, request.experience_years, profiles)

    @staticmethod
    def _comparable_window(
        request: RateSuggestionRequest,
    ) -> tuple[int, int, GeoPoint]:
        return (
            request.experience_years - EXPERIENCE_WINDOW_YEARS,
            request.experience_years + EXPERIENCE_WINDOW_YEARS,
            GeoPoint(coordinates=request.location),
        )

    # -------------------------------------------------------------------------
    # Aggregation
    # -------------------------------------------------------------------------

    def build_suggestion(
        self,
        skill: str,
        experience_years: int,
        profiles: list[WorkerProfile],
    ) -> RateSuggestion:
        """Aggregate comparable profiles into a suggestion."""
        hourly_rates = [p.rate.hourly for p in profiles if p.rate.hourly > 0]
        daily_rates = [p.rate.daily for p in profiles if p.rate.daily > 0]

        if not hourly_rates and not daily_rates:
            demand = DemandLevel.from_profile_count(len(profiles)) if profiles else None
            logger.debug(
                f"No comparable rates for {skill} ({len(profiles)} profiles), using defaults"
            )
            return self.default_suggestion(skill, experience_years, demand)

        avg_hourly, avg_daily = self._average_rates(hourly_rates, daily_rates)
        multiplier = experience_multiplier(experience_years)

        # Market spread in hourly terms
        pooled = hourly_rates + [d / HOURS_PER_DAY for d in daily_rates]

        logger.debug(
            f"Rate suggestion for {skill}: {len(profiles)} comparable profiles, "
            f"avg hourly {avg_hourly:.2f}, avg daily {avg_daily:.2f}"
        )

        return RateSuggestion(
            suggested=SuggestedRates(
                hourly=round_half_up(avg_hourly * multiplier),
                daily=round_half_up(avg_daily * multiplier),
                project=round_half_up(avg_daily * multiplier * PROJECT_DAYS),
            ),
            market=MarketRate(
                min=min(pooled),
                max=max(pooled),
                avg=(avg_hourly + avg_daily / HOURS_PER_DAY) / 2,
            ),
            factors=RateFactors(
                skill=skill,
                experience=experience_years,
                location=MARKET_LOCATION_LABEL,
                demand=DemandLevel.from_profile_count(len(profiles)),
            ),
        )

    @staticmethod
    def _average_rates(
        hourly_rates: list[float], daily_rates: list[float]
    ) -> tuple[float, float]:
        """Mean hourly and daily rate; a missing side is derived from the other."""
        avg_hourly = fmean(hourly_rates) if hourly_rates else None
        avg_daily = fmean(daily_rates) if daily_rates else None

        if avg_hourly is None:
            avg_hourly = avg_daily / HOURS_PER_DAY
        if avg_daily is None:
            avg_daily = avg_hourly * HOURS_PER_DAY

        return avg_hourly, avg_daily

    def default_suggestion(
        self,
        skill: str,
        experience_years: int,
        demand: Optional[DemandLevel] = None,
    ) -> RateSuggestion:
        """Suggestion from the fixed base-rate table."""
        base = default_base_rates(skill)
        multiplier = experience_multiplier(experience_years)

        return RateSuggestion(
            suggested=SuggestedRates(
                hourly=round_half_up(base["hourly"] * multiplier),
                daily=round_half_up(base["daily"] * multiplier),
                project=round_half_up(base["daily"] * multiplier * PROJECT_DAYS),
            ),
            market=MarketRate(
                min=round_half_up(base["hourly"] * DEFAULT_MARKET_MIN_FACTOR),
                max=round_half_up(base["hourly"] * DEFAULT_MARKET_MAX_FACTOR),
                avg=base["hourly"],
            ),
            factors=RateFactors(
                skill=skill,
                experience=experience_years,
                location=DEFAULT_LOCATION_LABEL,
                demand=demand or DemandLevel.MEDIUM,
            ),
        )
