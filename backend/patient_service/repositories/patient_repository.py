"""
SQLAlchemy implementation of the patient persistence gateway.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from patient_service.core.logging import get_logger
from patient_service.domain.exceptions import DuplicateEmailError, NotFoundError
from patient_service.domain.gateway import PatientGateway
from patient_service.domain.patient import Patient
from patient_service.models.patient import PatientRecord
from patient_service.repositories.mapper import apply_to_record, to_domain, to_record

logger = get_logger(__name__)


# PostgreSQL names the violated constraint, SQLite names the column
EMAIL_CONSTRAINT_MARKERS = ("uq_patients_email", "patients.email")


def _is_email_conflict(error: IntegrityError) -> bool:
    """Check whether an integrity error came from the email unique constraint."""
    message = str(error.orig).lower()
    return any(marker in message for marker in EMAIL_CONSTRAINT_MARKERS)


class SqlAlchemyPatientRepository(PatientGateway):
    """
    Patient gateway backed by an async SQLAlchemy session.

    Each save or delete commits its own transaction, so one lifecycle
    operation maps to exactly one commit.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository.

        Args:
            db: Async SQLAlchemy session scoped to the current request
        """
        self.db = db

    async def save(self, patient: Patient) -> Patient:
        if patient.id is None:
            record = to_record(patient)
            self.db.add(record)
        else:
            record = await self.db.get(PatientRecord, patient.id)
            if record is None:
                raise NotFoundError(patient.id)
            apply_to_record(patient, record)

        try:
            await self.db.flush()
            saved = to_domain(record)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if _is_email_conflict(e):
                logger.info("email_constraint_rejected_save", patient_id=str(patient.id))
                raise DuplicateEmailError(patient.email) from e
            raise
        return saved

    async def find_by_id(self, patient_id: UUID) -> Patient | None:
        record = await self.db.get(PatientRecord, patient_id)
        return to_domain(record) if record else None

    async def find_all(self) -> list[Patient]:
        result = await self.db.execute(
            select(PatientRecord).order_by(PatientRecord.name.asc(), PatientRecord.id.asc())
        )
        return [to_domain(record) for record in result.scalars().all()]

    async def delete(self, patient_id: UUID) -> None:
        await self.db.execute(delete(PatientRecord).where(PatientRecord.id == patient_id))
        await self.db.commit()

    async def exists_by_email(self, email: str) -> bool:
        result = await self.db.execute(
            select(PatientRecord.id).where(PatientRecord.email == email).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def exists_by_email_and_id_not(self, email: str, patient_id: UUID) -> bool:
        result = await self.db.execute(
            select(PatientRecord.id)
            .where(PatientRecord.email == email, PatientRecord.id != patient_id)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None
