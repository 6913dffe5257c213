"""Worker-job matching and rate suggestion module."""

from .geo import haversine_distance
from .interfaces import GeoProfileRepository, JobStore
from .matching_engine import MatchingEngine
from .rate_advisor import RateAdvisor
from .service import MatchingService, get_matching_service

__all__ = [
    "GeoProfileRepository",
    "JobStore",
    "MatchingEngine",
    "MatchingService",
    "RateAdvisor",
    "get_matching_service",
    "haversine_distance",
]
