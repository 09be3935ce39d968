"""
Shared test fixtures and configuration for entire test suite.

Provides: bearer tokens, sample job records, collaborator mocks,
in-memory async database
Dependencies: pytest, PyJWT, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import jwt
import pytest

from job_management.models.job import AuthorizationOutcome, JobRecord

SIGNING_SECRET = "test-signing-secret-that-is-long-enough-for-hs256"


def encode_token(claims: dict) -> str:
    """Encode a signed JWT; the service never verifies the signature."""
    return jwt.encode(claims, SIGNING_SECRET, algorithm="HS256")


@pytest.fixture
def make_token():
    """Provide a JWT factory taking a claims dict."""
    return encode_token


@pytest.fixture
def bearer_credential() -> str:
    """Provide a well-formed bearer credential with a jti claim."""
    return f"Bearer {encode_token({'jti': 'token-123'})}"


@pytest.fixture
def running_record() -> JobRecord:
    """Provide a job record for a running job."""
    return JobRecord(
        id="j1",
        job_id="00fabc1d2e3f4g5h",
        job_status="RUNNING",
        request_id="req-1",
        query="SELECT * FROM orders",
        destination="s3://results-bucket/j1/",
    )


@pytest.fixture
def mock_authorization_client() -> AsyncMock:
    """Provide authorization client that authorizes every request."""
    client = AsyncMock()
    client.authorize = AsyncMock(
        return_value=AuthorizationOutcome(status_code=200, request_id="auth-req-1", body="{}")
    )
    return client


@pytest.fixture
def mock_record_store(running_record: JobRecord) -> AsyncMock:
    """Provide record store returning the running record."""
    store = AsyncMock()
    store.get = AsyncMock(return_value=running_record)
    return store


@pytest.fixture
def mock_execution_client() -> MagicMock:
    """Provide execution client whose cancel succeeds."""
    client = MagicMock()
    client.cancel = MagicMock(return_value=None)
    return client


@pytest.fixture
async def test_async_engine():
    """
    Create in-memory SQLite async engine with the job details table.

    Yields:
        AsyncEngine: Test engine (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from job_management.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
