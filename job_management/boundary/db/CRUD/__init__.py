"""
CRUD operations for database models.

Usage:
    from job_management.boundary.db.CRUD import job_crud

    record = await job_crud.get_by_id(session, job_id)
"""

from job_management.boundary.db.CRUD.base_crud import BaseCRUD
from job_management.boundary.db.CRUD.job_crud import JobCRUD, job_crud

__all__ = [
    "BaseCRUD",
    "JobCRUD",
    "job_crud",
]
