"""
Tests for src.cli — command output and error mapping.

The database check and the matching service are patched out.
"""

import pytest
from typer.testing import CliRunner

import src.core.matching
from src.cli import app
from src.core.exceptions import NotFoundError, UpstreamFailureError
from src.core.matching import MatchingService

runner = CliRunner()


@pytest.fixture
def service(monkeypatch, job_store, profile_store):
    service = MatchingService(job_store, profile_store)
    monkeypatch.setattr("src.cli._require_connection", lambda: None)
    monkeypatch.setattr(src.core.matching, "get_matching_service", lambda: service)
    return service


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestInfo:
    def test_shows_collections(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "profiles" in result.output
        assert "jobs" in result.output


class TestMatch:
    def test_shows_ranked_workers(self, service, job_store, profile_store, make_job, make_profile):
        job_store.jobs["job-1"] = make_job()
        profile_store.profiles = [make_profile(user_id="a", name="Ramesh")]

        result = runner.invoke(app, ["match", "job-1", "--top", "5"])

        assert result.exit_code == 0
        assert "Ramesh" in result.output
        assert "100" in result.output

    def test_no_workers(self, service, job_store, make_job):
        job_store.jobs["job-1"] = make_job()
        result = runner.invoke(app, ["match", "job-1"])
        assert result.exit_code == 0
        assert "No workers found" in result.output

    def test_unknown_job(self, service):
        result = runner.invoke(app, ["match", "missing"])
        assert result.exit_code == 1
        assert "Job not found" in result.output

    def test_invalid_limit(self, service, job_store, make_job):
        job_store.jobs["job-1"] = make_job()
        result = runner.invoke(app, ["match", "job-1", "-n", "0"])
        assert result.exit_code == 1
        assert "Invalid input" in result.output

    def test_store_failure(self, service, job_store, upstream_error):
        job_store.error = upstream_error
        result = runner.invoke(app, ["match", "job-1"])
        assert result.exit_code == 1
        assert "Database error" in result.output


class TestSuggestRates:
    def test_default_rates(self, service):
        result = runner.invoke(
            app, ["suggest-rates", "Electrician", "--lng", "77.2167", "--lat", "28.6315"]
        )
        assert result.exit_code == 0
        assert "180" in result.output
        assert "900" in result.output
        assert "Default rates" in result.output

    def test_out_of_range_location(self, service):
        result = runner.invoke(
            app, ["suggest-rates", "Electrician", "--lng", "200", "--lat", "28.6"]
        )
        assert result.exit_code == 1
        assert "Invalid input" in result.output

    def test_store_failure(self, service, profile_store):
        profile_store.error = UpstreamFailureError("profiles.find failed")
        result = runner.invoke(
            app, ["suggest-rates", "Cook", "-e", "3", "--lng", "77.2", "--lat", "28.6"]
        )
        assert result.exit_code == 1
        assert "Database error" in result.output


def test_not_found_error_message():
    assert str(NotFoundError("Job", "abc")) == "Job not found: abc"
