"""
Application-wide constants for the Labour Chowk matching engine.

Scoring weights, search radii and the fallback rate table live here so the
matching code reads as arithmetic over named values.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "labour-chowk"
APP_DISPLAY_NAME: Final[str] = "Labour Chowk Matching Engine"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Skills
# =============================================================================

# Trades accepted on worker profiles and job postings
SKILLS: Final[tuple[str, ...]] = (
    "Carpenter",
    "Plumber",
    "Electrician",
    "Painter",
    "Mason",
    "Cleaner",
    "Gardner",
    "Driver",
    "Cook",
    "Security Guard",
    "Handyman",
    "Welder",
    "Mechanic",
    "Tailor",
    "Barber",
)

# Python's date.weekday() order
WEEKDAYS: Final[tuple[str, ...]] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


# =============================================================================
# Geo Constants
# =============================================================================

EARTH_RADIUS_METERS: Final[float] = 6_371_000.0

# Candidate search radius around a job
MATCH_RADIUS_METERS: Final[int] = 50_000

# Comparable-worker radius for rate suggestions
RATE_RADIUS_METERS: Final[int] = 25_000

# Distance score loses this many points per kilometre
DISTANCE_PENALTY_PER_KM: Final[float] = 2.0


# =============================================================================
# Scoring Constants
# =============================================================================

MAX_FACTOR_SCORE: Final[float] = 100.0

# Weights for the six match factors (sum to 1.0)
MATCH_WEIGHTS: Final[dict[str, float]] = {
    "skill_match": 0.40,
    "distance_score": 0.20,
    "rate_score": 0.15,
    "availability_score": 0.10,
    "experience_score": 0.10,
    "rating_score": 0.05,
}

# Experience score gained per year, capped at MAX_FACTOR_SCORE
EXPERIENCE_POINTS_PER_YEAR: Final[float] = 10.0

MAX_RATING: Final[float] = 5.0


# =============================================================================
# Rate Suggestion Constants
# =============================================================================

# Comparable workers are within +/- this many years of experience
EXPERIENCE_WINDOW_YEARS: Final[int] = 2

# Suggested rates rise 5% per year of experience
EXPERIENCE_RATE_STEP: Final[float] = 0.05

# Project quotes assume a five-day engagement
PROJECT_DAYS: Final[int] = 5

# Working hours in a day, used to compare daily and hourly rates
HOURS_PER_DAY: Final[int] = 8

# Default market band around the base hourly rate
DEFAULT_MARKET_MIN_FACTOR: Final[float] = 0.8
DEFAULT_MARKET_MAX_FACTOR: Final[float] = 1.5

# Base rates (INR) used when no comparable workers are nearby
DEFAULT_RATES: Final[dict[str, dict[str, int]]] = {
    "Carpenter": {"hourly": 150, "daily": 800},
    "Plumber": {"hourly": 120, "daily": 700},
    "Electrician": {"hourly": 180, "daily": 900},
    "Painter": {"hourly": 100, "daily": 600},
    "Mason": {"hourly": 130, "daily": 750},
    "Cleaner": {"hourly": 80, "daily": 500},
    "Gardner": {"hourly": 90, "daily": 550},
    "Driver": {"hourly": 150, "daily": 800},
    "Cook": {"hourly": 120, "daily": 700},
    "Security Guard": {"hourly": 100, "daily": 600},
    "Handyman": {"hourly": 110, "daily": 650},
    "Welder": {"hourly": 160, "daily": 850},
}

FALLBACK_RATE: Final[dict[str, int]] = {"hourly": 100, "daily": 600}

# Comparable-worker counts below which demand is considered high / medium
DEMAND_THRESHOLDS: Final[dict[str, int]] = {
    "high": 5,
    "medium": 15,
}

MARKET_LOCATION_LABEL: Final[str] = "Local market"
DEFAULT_LOCATION_LABEL: Final[str] = "Default rates"


# =============================================================================
# Enums
# =============================================================================


class PayType(str, Enum):
    """How a job's pay amount is quoted."""

    HOURLY = "hourly"
    DAILY = "daily"
    PROJECT = "project"


class DemandLevel(str, Enum):
    """Relative demand for a skill, inferred from worker scarcity."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_profile_count(cls, count: int) -> "DemandLevel":
        """Fewer comparable workers means higher demand."""
        if count < DEMAND_THRESHOLDS["high"]:
            return cls.HIGH
        elif count < DEMAND_THRESHOLDS["medium"]:
            return cls.MEDIUM
        return cls.LOW


class JobStatus(str, Enum):
    """Status of a job posting."""

    DRAFT = "draft"
    ACTIVE = "active"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Urgency(str, Enum):
    """How soon the customer needs the job started."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TimeSlot(str, Enum):
    """Part of the day a worker can be booked for."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"
