"""AWS adapters."""

from job_management.boundary.aws.emr_client import EMRServerlessClient

__all__ = ["EMRServerlessClient"]
