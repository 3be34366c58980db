"""Patient lifecycle orchestration.

Sequences uniqueness checks, domain transitions and persistence for a
single patient operation. All validation runs before the one call that
writes, so an operation either commits completely or changes nothing.
"""

from collections.abc import Callable
from datetime import date
from uuid import UUID

from patient_service.core.logging import audit_logger, get_logger
from patient_service.domain.exceptions import (
    AlreadyInactiveError,
    InactivePatientError,
    NotFoundError,
)
from patient_service.domain.gateway import PatientGateway
from patient_service.domain.patient import Patient
from patient_service.domain.uniqueness import validate_email_unique
from patient_service.schemas.patient import PatientRequest, PatientResponse

logger = get_logger(__name__)


class PatientLifecycleService:
    """Create, update, deactivate and reactivate patients.

    Args:
        gateway: Persistence gateway the service loads from and saves to
        today: Clock used for deactivation dates and the birth-date check

    """

    def __init__(self, gateway: PatientGateway, today: Callable[[], date] = date.today):
        self.gateway = gateway
        self.today = today

    async def _load(self, patient_id: UUID) -> Patient:
        patient = await self.gateway.find_by_id(patient_id)
        if patient is None:
            raise NotFoundError(patient_id)
        return patient

    async def create(self, request: PatientRequest) -> PatientResponse:
        """Register a new, active patient."""
        await validate_email_unique(request.email, self.gateway.exists_by_email)
        patient = Patient(
            request.name,
            request.email,
            request.address,
            request.date_of_birth,
            request.registered_date,
            today=self.today(),
        )
        saved = await self.gateway.save(patient)

        audit_logger.log_patient_event("CREATED", saved.id)
        return PatientResponse.from_domain(saved)

    async def update(self, patient_id: UUID, request: PatientRequest) -> PatientResponse:
        """Replace the mutable fields of an active patient."""
        patient = await self._load(patient_id)
        if not patient.is_active():
            raise InactivePatientError(
                f"Cannot update an inactive patient with ID: {patient_id}", patient_id
            )

        async def email_taken_by_other(email: str) -> bool:
            return await self.gateway.exists_by_email_and_id_not(email, patient_id)

        await validate_email_unique(request.email, email_taken_by_other)
        updated = patient.with_changes(
            request.name,
            request.email,
            request.address,
            request.date_of_birth,
            today=self.today(),
        )
        saved = await self.gateway.save(updated)

        audit_logger.log_patient_event("UPDATED", patient_id)
        return PatientResponse.from_domain(saved)

    async def deactivate(self, patient_id: UUID) -> None:
        """Mark a patient inactive as of today."""
        patient = await self._load(patient_id)
        try:
            patient.deactivate(self.today())
        except AlreadyInactiveError as e:
            raise InactivePatientError(
                f"Patient is already inactive with ID: {patient_id}", patient_id
            ) from e
        await self.gateway.save(patient)

        audit_logger.log_patient_event("DEACTIVATED", patient_id)

    async def activate(self, patient_id: UUID) -> None:
        """Return an inactive patient to active status."""
        patient = await self._load(patient_id)
        patient.activate()
        await self.gateway.save(patient)

        audit_logger.log_patient_event("ACTIVATED", patient_id)

    async def get(self, patient_id: UUID) -> PatientResponse:
        return PatientResponse.from_domain(await self._load(patient_id))

    async def list_patients(self) -> list[PatientResponse]:
        patients = await self.gateway.find_all()
        logger.debug("patients_listed", count=len(patients))
        return [PatientResponse.from_domain(p) for p in patients]

    async def delete(self, patient_id: UUID) -> None:
        """Remove a patient record permanently."""
        await self._load(patient_id)
        await self.gateway.delete(patient_id)

        audit_logger.log_patient_event("DELETED", patient_id)
