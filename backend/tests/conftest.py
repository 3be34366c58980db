"""Pytest configuration and shared fixtures for Patient Service backend tests.

This module provides common fixtures for testing the backend components
including database sessions, the patient repository and service, and
sample request data.
"""

from collections.abc import AsyncGenerator
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from patient_service.domain.gateway import PatientGateway
from patient_service.models.base import Base
from patient_service.repositories.patient_repository import SqlAlchemyPatientRepository
from patient_service.schemas.patient import PatientRequest
from patient_service.services.patient_lifecycle import PatientLifecycleService


@pytest.fixture
async def session_maker(tmp_path: Path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Create a file-backed SQLite database with all tables."""
    db_file = tmp_path / "patients.db"
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_file}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    await engine.dispose()


@pytest.fixture
async def db_session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session for one test."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def repository(db_session: AsyncSession) -> SqlAlchemyPatientRepository:
    """Patient repository bound to the test session."""
    return SqlAlchemyPatientRepository(db_session)


@pytest.fixture
def service(repository: SqlAlchemyPatientRepository) -> PatientLifecycleService:
    """Lifecycle service backed by the SQLite repository."""
    return PatientLifecycleService(repository)


@pytest.fixture
def mock_gateway() -> AsyncMock:
    """Create a mock persistence gateway with an empty store."""
    gateway = AsyncMock(spec=PatientGateway)
    gateway.exists_by_email.return_value = False
    gateway.exists_by_email_and_id_not.return_value = False
    gateway.find_by_id.return_value = None
    gateway.find_all.return_value = []
    return gateway


@pytest.fixture
def jane_request() -> PatientRequest:
    """Request for the reference patient Jane Doe."""
    return PatientRequest(
        name="Jane Doe",
        email="jane@x.com",
        address="1 Main St",
        date_of_birth=date(1990, 1, 1),
        registered_date=date(2024, 1, 1),
    )


@pytest.fixture
def sample_patient_data() -> dict[str, str]:
    """Sample JSON payload for API tests."""
    return {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "address": "1 Main St",
        "date_of_birth": "1990-01-01",
        "registered_date": "2024-01-01",
    }
