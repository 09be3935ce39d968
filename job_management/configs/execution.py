"""
Execution backend configuration settings.

Dependencies: pydantic, pydantic_settings
System role: EMR Serverless client configuration
"""

from pydantic import Field

from job_management.configs.base import BaseSettings


class ExecutionSettings(BaseSettings):
    """EMR Serverless application configuration."""

    region: str = Field(
        default="us-east-1",
        validation_alias="REGION",
        description="AWS region of the EMR Serverless application",
    )
    application_id: str = Field(
        default="",
        validation_alias="APPLICATION_ID",
        description="EMR Serverless application that owns the job runs",
    )
    connect_timeout: float = Field(
        default=5.0,
        validation_alias="EMR_CONNECT_TIMEOUT",
        description="Connect timeout for EMR Serverless calls in seconds",
    )
    read_timeout: float = Field(
        default=30.0,
        validation_alias="EMR_READ_TIMEOUT",
        description="Read timeout for EMR Serverless calls in seconds",
    )
