"""
Job record store.

Single-row point lookup of job metadata by external job identifier,
bounded by a deadline. One attempt per request; failures are surfaced
immediately as JobNotFoundError or JobStoreError.

Dependencies: sqlalchemy, job_management.boundary.db.CRUD
System role: Job state lookup stage of the request pipeline
"""

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from job_management.boundary.db.CRUD.job_crud import JobCRUD, job_crud
from job_management.core.exceptions import JobNotFoundError, JobStoreError
from job_management.models.job import JobRecord
from job_management.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class JobRecordStore:
    """Reads JobRecord values from the job details table."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        lookup_timeout: float = 10.0,
        crud: JobCRUD = job_crud,
    ) -> None:
        """
        Initialize job record store.

        Args:
            session_factory: Shared async session factory
            lookup_timeout: Deadline in seconds for one lookup
            crud: CRUD helper for the job details model
        """
        self._session_factory = session_factory
        self._lookup_timeout = lookup_timeout
        self._crud = crud

    async def get(self, job_id: str) -> JobRecord:
        """
        Fetch a job record.

        Args:
            job_id: External job identifier

        Returns:
            JobRecord: Snapshot of the stored row

        Raises:
            JobNotFoundError: No row matches job_id
            JobStoreError: Connectivity, decode, or deadline failure
        """
        try:
            async with self._session_factory() as session:
                model = await asyncio.wait_for(
                    self._crud.get_by_id(session, job_id),
                    timeout=self._lookup_timeout,
                )
                if model is None:
                    raise JobNotFoundError(job_id)
                return JobRecord.model_validate(model)
        except JobNotFoundError:
            raise
        except asyncio.TimeoutError as e:
            logger.error("get - Lookup for id: %s exceeded %ss", job_id, self._lookup_timeout)
            raise JobStoreError("job record lookup timed out", job_id=job_id) from e
        except (SQLAlchemyError, OSError, ValueError) as e:
            log_exception_with_context(
                logger,
                "get - Failed to get job details",
                e,
                job_id=job_id,
            )
            raise JobStoreError(
                "job record lookup failed",
                job_id=job_id,
                details={"error_type": type(e).__name__},
            ) from e
