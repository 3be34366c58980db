"""Tests for demo data seeding."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from patient_service.repositories.patient_repository import SqlAlchemyPatientRepository
from patient_service.services.demo_data import DEMO_PATIENTS, seed_demo_patients


@pytest.mark.asyncio
async def test_seed_inserts_each_demo_patient_once(db_session: AsyncSession) -> None:
    first = await seed_demo_patients(db_session)
    second = await seed_demo_patients(db_session)

    assert first == len(DEMO_PATIENTS)
    assert second == 0

    patients = await SqlAlchemyPatientRepository(db_session).find_all()
    assert sorted(p.email for p in patients) == sorted(d["email"] for d in DEMO_PATIENTS)
    assert all(p.is_active() for p in patients)
