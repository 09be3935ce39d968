"""
Job details ORM model.

Maps the emr_job_details table written by the job submission service.
This API only reads it; status columns are advanced by the backend's
status reporting, never here.

Dependencies: sqlalchemy, job_management.boundary.db.base
System role: Persisted job metadata for status and cancellation requests
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from job_management.boundary.db.base import Base


class JobDetailModel(Base):
    """
    Job details ORM model.

    Column names are the lowercase names used by the submission service;
    attribute names follow Python conventions.

    Attributes:
        id: External job identifier returned to API callers (primary key)
        job_id: EMR Serverless job run ID
        job_status: Last reported run status (see JobStatus)
        request_id: ID of the submitting request
        query: Query text executed by the job
        destination: Output location of the job results
        token_id: Credential claim captured at submission (nullable)
    """

    __tablename__ = "emr_job_details"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)

    job_id: Mapped[str] = mapped_column(
        "jobid",
        String(255),
        nullable=False,
        doc="EMR Serverless job run ID",
    )

    job_status: Mapped[str] = mapped_column(
        "jobstatus",
        String(64),
        nullable=False,
    )

    request_id: Mapped[str] = mapped_column(
        "requestid",
        String(255),
        nullable=False,
    )

    query: Mapped[str] = mapped_column(Text, nullable=False, default="")

    destination: Mapped[str] = mapped_column(Text, nullable=False, default="")

    token_id: Mapped[str | None] = mapped_column(
        "tokenid",
        String(255),
        nullable=True,
        doc="Credential claim captured at submission time",
    )
