"""
Tests for src.utils.constants — enums, scoring weights, rate tables.
"""

import pytest

from src.utils.constants import (
    DEFAULT_RATES,
    FALLBACK_RATE,
    MATCH_WEIGHTS,
    SKILLS,
    WEEKDAYS,
    DemandLevel,
    JobStatus,
    PayType,
)


# ── DemandLevel.from_profile_count() ────────────────────────────────────────


class TestDemandLevelFromProfileCount:
    def test_high_with_no_profiles(self):
        assert DemandLevel.from_profile_count(0) == DemandLevel.HIGH

    def test_high_below_five(self):
        assert DemandLevel.from_profile_count(4) == DemandLevel.HIGH

    def test_medium_at_five(self):
        assert DemandLevel.from_profile_count(5) == DemandLevel.MEDIUM

    def test_medium_below_fifteen(self):
        assert DemandLevel.from_profile_count(14) == DemandLevel.MEDIUM

    def test_low_at_fifteen(self):
        assert DemandLevel.from_profile_count(15) == DemandLevel.LOW

    def test_low_many(self):
        assert DemandLevel.from_profile_count(200) == DemandLevel.LOW


# ── MATCH_WEIGHTS ───────────────────────────────────────────────────────────


class TestMatchWeights:
    def test_sum_to_one(self):
        assert sum(MATCH_WEIGHTS.values()) == pytest.approx(1.0)

    def test_six_factors(self):
        assert set(MATCH_WEIGHTS) == {
            "skill_match",
            "distance_score",
            "rate_score",
            "availability_score",
            "experience_score",
            "rating_score",
        }

    def test_skill_weighs_most(self):
        assert max(MATCH_WEIGHTS, key=MATCH_WEIGHTS.get) == "skill_match"


# ── rate tables ─────────────────────────────────────────────────────────────


class TestDefaultRates:
    def test_twelve_skills(self):
        assert len(DEFAULT_RATES) == 12

    def test_skills_are_known_trades(self):
        assert set(DEFAULT_RATES) <= set(SKILLS)

    def test_daily_exceeds_hourly(self):
        for skill, rates in DEFAULT_RATES.items():
            assert rates["daily"] > rates["hourly"], skill

    def test_fallback(self):
        assert FALLBACK_RATE == {"hourly": 100, "daily": 600}


# ── enums ───────────────────────────────────────────────────────────────────


class TestEnums:
    def test_weekdays_follow_date_weekday(self):
        assert WEEKDAYS[0] == "monday"
        assert WEEKDAYS[6] == "sunday"

    def test_pay_types(self):
        assert {p.value for p in PayType} == {"hourly", "daily", "project"}

    def test_job_status_is_str(self):
        assert JobStatus.ACTIVE == "active"
