"""
Database configuration settings.

Manages PostgreSQL connection parameters for the job details table.
Variable names follow the DB_* convention of the deployed Lambda.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import URL

from job_management.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    name: str = Field(default="jobs", description="PostgreSQL database name")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    sslmode: str = Field(
        default="disable",
        description="asyncpg ssl mode (disable, allow, prefer, require, verify-ca, verify-full)",
    )
    lookup_timeout: float = Field(
        default=10.0,
        description="Deadline in seconds for a single job record lookup",
    )

    @property
    def async_database_url(self) -> URL:
        """
        Construct async PostgreSQL connection URL.

        Credentials are escaped by SQLAlchemy. Any sslmode other than
        "disable" is passed to asyncpg as its ssl parameter.

        Returns:
            URL: SQLAlchemy async-compatible database URL
        """
        query = {} if self.sslmode == "disable" else {"ssl": self.sslmode}
        return URL.create(
            "postgresql+asyncpg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.name,
            query=query,
        )
