"""Tests for the SQLAlchemy patient repository."""

from datetime import date
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from patient_service.domain.exceptions import DuplicateEmailError, NotFoundError
from patient_service.domain.patient import Patient, PatientStatus
from patient_service.repositories.patient_repository import (
    SqlAlchemyPatientRepository,
    _is_email_conflict,
)


def make_patient(name: str = "Jane Doe", email: str = "jane@x.com") -> Patient:
    return Patient(name, email, "1 Main St", date(1990, 1, 1), date(2024, 1, 1))


@pytest.mark.asyncio
async def test_save_assigns_identifier(repository: SqlAlchemyPatientRepository) -> None:
    saved = await repository.save(make_patient())

    assert saved.id is not None
    assert saved.status is PatientStatus.ACTIVE

    loaded = await repository.find_by_id(saved.id)
    assert loaded is not None
    assert loaded.id == saved.id
    assert loaded.email == "jane@x.com"


@pytest.mark.asyncio
async def test_save_existing_updates_in_place(repository: SqlAlchemyPatientRepository) -> None:
    saved = await repository.save(make_patient())
    saved.deactivate(date(2025, 6, 1))

    updated = await repository.save(saved)

    assert updated.id == saved.id
    assert updated.status is PatientStatus.INACTIVE
    assert len(await repository.find_all()) == 1


@pytest.mark.asyncio
async def test_save_persists_across_sessions(
    session_maker: async_sessionmaker[AsyncSession],
) -> None:
    async with session_maker() as session:
        saved = await SqlAlchemyPatientRepository(session).save(make_patient())

    async with session_maker() as session:
        loaded = await SqlAlchemyPatientRepository(session).find_by_id(saved.id)

    assert loaded is not None
    assert loaded.name == "Jane Doe"


@pytest.mark.asyncio
async def test_unique_constraint_rejects_duplicate_email(
    repository: SqlAlchemyPatientRepository,
) -> None:
    await repository.save(make_patient())

    with pytest.raises(DuplicateEmailError):
        await repository.save(make_patient(name="John Roe"))

    patients = await repository.find_all()
    assert [p.name for p in patients] == ["Jane Doe"]


@pytest.mark.asyncio
async def test_save_unknown_identifier_raises(repository: SqlAlchemyPatientRepository) -> None:
    ghost = Patient(
        "Jane Doe", "jane@x.com", "1 Main St", date(1990, 1, 1), date(2024, 1, 1), id=uuid4()
    )

    with pytest.raises(NotFoundError):
        await repository.save(ghost)


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(repository: SqlAlchemyPatientRepository) -> None:
    assert await repository.find_by_id(uuid4()) is None


@pytest.mark.asyncio
async def test_find_all_orders_by_name(repository: SqlAlchemyPatientRepository) -> None:
    await repository.save(make_patient("Zoe Adams", "zoe@x.com"))
    await repository.save(make_patient("Adam Smith", "adam@x.com"))

    patients = await repository.find_all()

    assert [p.name for p in patients] == ["Adam Smith", "Zoe Adams"]


@pytest.mark.asyncio
async def test_delete_removes_record(repository: SqlAlchemyPatientRepository) -> None:
    saved = await repository.save(make_patient())

    await repository.delete(saved.id)

    assert await repository.find_by_id(saved.id) is None
    assert await repository.exists_by_email("jane@x.com") is False


@pytest.mark.asyncio
async def test_exists_by_email(repository: SqlAlchemyPatientRepository) -> None:
    assert await repository.exists_by_email("jane@x.com") is False

    await repository.save(make_patient())

    assert await repository.exists_by_email("jane@x.com") is True
    assert await repository.exists_by_email("other@x.com") is False


@pytest.mark.asyncio
async def test_exists_by_email_and_id_not_excludes_self(
    repository: SqlAlchemyPatientRepository,
) -> None:
    jane = await repository.save(make_patient())
    john = await repository.save(make_patient("John Roe", "john@x.com"))

    assert await repository.exists_by_email_and_id_not("jane@x.com", jane.id) is False
    assert await repository.exists_by_email_and_id_not("jane@x.com", john.id) is True


@pytest.mark.parametrize(
    "driver_message, expected",
    [
        ('duplicate key value violates unique constraint "uq_patients_email"', True),
        ("UNIQUE constraint failed: patients.email", True),
        ('new row violates check constraint "ck_patients_deactivated_date_matches_status"', False),
        ("NOT NULL constraint failed: patients.name", False),
    ],
)
def test_email_conflict_matches_constraint_name(driver_message: str, expected: bool) -> None:
    error = IntegrityError("INSERT INTO patients", {}, Exception(driver_message))

    assert _is_email_conflict(error) is expected
