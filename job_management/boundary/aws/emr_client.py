"""
EMR Serverless client for job run cancellation.

Dependencies: boto3
System role: Job execution backend adapter (cancel only)
"""

import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from job_management.core.exceptions import ExecutionError

logger = logging.getLogger(__name__)


class EMRServerlessClient:
    """Cancels job runs on one EMR Serverless application."""

    def __init__(
        self,
        application_id: str,
        region: str = "us-east-1",
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        client=None,
    ) -> None:
        """
        Initialize EMR Serverless client.

        Args:
            application_id: EMR Serverless application owning the job runs
            region: AWS region of the application
            connect_timeout: Connect timeout in seconds
            read_timeout: Read timeout in seconds
            client: Pre-built boto3 emr-serverless client (tests, custom sessions)
        """
        self._application_id = application_id
        self._client = client or boto3.client(
            "emr-serverless",
            region_name=region,
            config=Config(
                connect_timeout=connect_timeout,
                read_timeout=read_timeout,
                retries={"total_max_attempts": 1},
            ),
        )

    def cancel(self, run_id: str) -> None:
        """
        Cancel a job run.

        Not retried and not re-checked; callers observe the resulting
        status with a later GET.

        Args:
            run_id: EMR Serverless job run ID

        Raises:
            ExecutionError: If the cancel call fails
        """
        logger.info("cancel - Cancelling job run: %s", run_id)
        try:
            self._client.cancel_job_run(
                applicationId=self._application_id,
                jobRunId=run_id,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("cancel - Failed to cancel job run: %s error: %s", run_id, e)
            raise ExecutionError(
                f"Failed to cancel job for jobId: {run_id} with error: {e}",
                run_id=run_id,
                details={"error_type": type(e).__name__},
            ) from e
