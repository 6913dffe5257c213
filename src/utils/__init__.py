"""
Utility modules for the Labour Chowk matching engine.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Scoring weights, radii, default rates and enums
"""

from src.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    settings,
    ROOT_DIR,
)
from src.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    SKILLS,
    DemandLevel,
    JobStatus,
    PayType,
    TimeSlot,
    Urgency,
)
from src.utils.logger import (
    setup_logging,
    get_logger,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "settings",
    "ROOT_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "SKILLS",
    "DemandLevel",
    "JobStatus",
    "PayType",
    "TimeSlot",
    "Urgency",
    # Logger
    "setup_logging",
    "get_logger",
    "log",
]
