"""
Pydantic data models and schemas for the Labour Chowk matching engine.

This module provides the documents read from the marketplace store, the
request schemas accepted by the matching operations and their results.
"""

# Base models
from .base import BaseDocument, EmbeddedModel, GeoPoint, PyObjectId, TimestampMixin

# Profile models
from .profile import (
    DayAvailability,
    ProfileRating,
    RateCard,
    WeeklyAvailability,
    WorkerProfile,
)

# Job models
from .job import Job, JobDuration, JobPay

# Result models
from .match import (
    MarketRate,
    MatchFactors,
    MatchResult,
    RateFactors,
    RateSuggestion,
    SuggestedRates,
)

# Request schemas
from .requests import MatchRequest, RateSuggestionRequest

__all__ = [
    # Base
    "BaseDocument",
    "EmbeddedModel",
    "GeoPoint",
    "PyObjectId",
    "TimestampMixin",
    # Profile
    "DayAvailability",
    "ProfileRating",
    "RateCard",
    "WeeklyAvailability",
    "WorkerProfile",
    # Job
    "Job",
    "JobDuration",
    "JobPay",
    # Results
    "MarketRate",
    "MatchFactors",
    "MatchResult",
    "RateFactors",
    "RateSuggestion",
    "SuggestedRates",
    # Requests
    "MatchRequest",
    "RateSuggestionRequest",
]
