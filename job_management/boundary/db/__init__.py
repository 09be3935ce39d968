"""
Database boundary layer: ORM model, read operations, and connection management.

Exports:
  - Base: Model building block
  - get_async_engine(), get_async_session_factory(): Async connection management
  - JobDetailModel: Job details table
  - JobCRUD, job_crud: Read helpers
  - JobRecordStore: Lookup stage used by the request handler

Dependencies: sqlalchemy, job_management.configs
System role: Database adapter for job metadata
"""

from job_management.boundary.db.base import Base
from job_management.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from job_management.boundary.db.models.job_model import JobDetailModel
from job_management.boundary.db.CRUD import BaseCRUD, JobCRUD, job_crud
from job_management.boundary.db.job_record_store import JobRecordStore

__all__ = [
    "Base",
    "get_async_engine",
    "get_async_session_factory",
    "JobDetailModel",
    "BaseCRUD",
    "JobCRUD",
    "job_crud",
    "JobRecordStore",
]
