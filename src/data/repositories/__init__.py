"""
Database repositories for the Labour Chowk matching engine.

MongoDB implementations of the store interfaces the matching engine reads
through, following the repository pattern for clean data access.
"""

# Base repository
from .base import BaseRepository

# Entity repositories
from .job_repository import JobRepository, get_job_repository
from .profile_repository import ProfileRepository, get_profile_repository

__all__ = [
    # Base
    "BaseRepository",
    # Job
    "JobRepository",
    "get_job_repository",
    # Profile
    "ProfileRepository",
    "get_profile_repository",
]
