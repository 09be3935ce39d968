"""ORM models."""

from job_management.boundary.db.models.job_model import JobDetailModel

__all__ = ["JobDetailModel"]
