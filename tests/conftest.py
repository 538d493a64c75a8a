"""Pytest configuration and fixtures."""

import os

# Settings are read at import time; point them at the test database first
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import StaticPool
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from assessment_hub.db.base import Base
from assessment_hub.db.session import get_db
from assessment_hub.main import app
from assessment_hub.models.assessment import Assessment, AssessmentStatus
from assessment_hub.models.client import Client, RiskLevel


# Use SQLite for testing (simpler than spinning up postgres)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    """Create async test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async database session for tests."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(async_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app with the test session injected."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield async_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def existing_client(async_session: AsyncSession) -> Client:
    """A client already on file at LOW risk."""
    record = Client(
        id="C001",
        name="Jane Example",
        email="jane@example.org",
        risk_level=RiskLevel.LOW,
    )
    async_session.add(record)
    await async_session.commit()
    await async_session.refresh(record)
    return record


@pytest_asyncio.fixture
async def pending_phq9(async_session: AsyncSession, existing_client: Client) -> Assessment:
    """A pending PHQ-9 linked to the existing client."""
    assessment = Assessment(
        type="PHQ-9",
        name="PHQ-9",
        client_id=existing_client.id,
        status=AssessmentStatus.PENDING,
    )
    async_session.add(assessment)
    await async_session.commit()
    await async_session.refresh(assessment)
    return assessment


def answers(count: int, value: int = 0, **overrides: int) -> dict[int, int]:
    """Build a responses map for questions 1..count.

    Overrides use keyword names like q9=2.
    """
    responses = {i: value for i in range(1, count + 1)}
    for key, override in overrides.items():
        responses[int(key.lstrip("q"))] = override
    return responses


def answers_totalling(count: int, total: int, max_value: int = 3) -> dict[int, int]:
    """Fill questions in order until the requested total is reached."""
    responses = {i: 0 for i in range(1, count + 1)}
    remaining = total
    for i in range(1, count + 1):
        if remaining <= 0:
            break
        value = min(max_value, remaining)
        responses[i] = value
        remaining -= value
    assert remaining == 0, f"cannot reach {total} with {count} items"
    return responses


async def create_and_complete(
    client: AsyncClient, type_id: str, client_id: str | None, responses: dict
) -> dict:
    """Create an assessment over the API and submit responses for it."""
    created = await client.post(
        "/api/v1/assessments", json={"type": type_id, "client_id": client_id}
    )
    assert created.status_code == 201
    completed = await client.post(
        f"/api/v1/assessments/{created.json()['id']}/complete",
        json={"responses": responses},
    )
    assert completed.status_code == 200
    return completed.json()
