"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI and the Lambda entry point.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from job_management.configs.base import BaseSettings
from job_management.configs.authorization import AuthorizationSettings
from job_management.configs.database import DatabaseSettings
from job_management.configs.execution import ExecutionSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    authorization: AuthorizationSettings = Field(default_factory=AuthorizationSettings)
    execution: ExecutionSettings = Field(default_factory=ExecutionSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from job_management.configs import get_settings
        settings = get_settings()
    """
    return Settings()
