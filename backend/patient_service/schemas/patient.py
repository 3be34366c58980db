"""Request and response shapes for patient operations."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from patient_service.domain.patient import Patient, PatientStatus


class PatientRequest(BaseModel):
    """Fields supplied when creating or updating a patient.

    Every field is optional here. Missing, null and blank values are
    rejected by the domain, so every field rule lives in one place.
    """

    name: str | None = Field(None, description="Full name")
    email: str | None = Field(None, description="Email address, unique across all patients")
    address: str | None = Field(None, description="Postal address")
    date_of_birth: date | None = Field(None, description="Date of birth (must be in the past)")
    registered_date: date | None = Field(
        None, description="Registration date (required on create, ignored on update)"
    )


class PatientResponse(BaseModel):
    """Projection of a stored patient."""

    id: UUID
    name: str
    email: str
    address: str
    date_of_birth: date
    registered_date: date
    status: PatientStatus
    deactivated_date: date | None = None

    @classmethod
    def from_domain(cls, patient: Patient) -> "PatientResponse":
        return cls(
            id=patient.id,
            name=patient.name,
            email=patient.email,
            address=patient.address,
            date_of_birth=patient.date_of_birth,
            registered_date=patient.registered_date,
            status=patient.status,
            deactivated_date=patient.deactivated_date,
        )
