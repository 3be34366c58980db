"""Optional demo data seeding (development only)."""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from patient_service.core.logging import get_logger
from patient_service.repositories.patient_repository import SqlAlchemyPatientRepository
from patient_service.schemas.patient import PatientRequest
from patient_service.services.patient_lifecycle import PatientLifecycleService

logger = get_logger(__name__)


DEMO_PATIENTS = [
    {
        "name": "John Doe",
        "email": "john.doe@demo-clinic.org",
        "address": "12 Harbour Road",
        "date_of_birth": date(1965, 3, 15),
        "registered_date": date(2024, 1, 8),
    },
    {
        "name": "Jane Smith",
        "email": "jane.smith@demo-clinic.org",
        "address": "48 Elm Street",
        "date_of_birth": date(1978, 7, 22),
        "registered_date": date(2024, 2, 19),
    },
    {
        "name": "Robert Johnson",
        "email": "robert.johnson@demo-clinic.org",
        "address": "7 Mill Lane",
        "date_of_birth": date(1955, 11, 8),
        "registered_date": date(2024, 3, 4),
    },
]


async def seed_demo_patients(db: AsyncSession) -> int:
    """Insert demo patients whose emails are not yet registered."""
    repository = SqlAlchemyPatientRepository(db)
    service = PatientLifecycleService(repository)

    inserted = 0
    for demo in DEMO_PATIENTS:
        if await repository.exists_by_email(demo["email"]):
            continue
        await service.create(PatientRequest(**demo))
        inserted += 1

    if inserted:
        logger.warning("Demo patients seeded", count=inserted)
    return inserted
