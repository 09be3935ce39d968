"""
Job details read operations.

Dependencies: sqlalchemy, job_management.boundary.db.models
System role: Job metadata lookups for the request pipeline
"""

from job_management.boundary.db.CRUD.base_crud import BaseCRUD
from job_management.boundary.db.models.job_model import JobDetailModel


class JobCRUD(BaseCRUD[JobDetailModel]):
    """Reads for JobDetailModel, keyed by the external job identifier."""

    def __init__(self) -> None:
        """Initialize JobCRUD with JobDetailModel."""
        super().__init__(JobDetailModel)


job_crud = JobCRUD()
