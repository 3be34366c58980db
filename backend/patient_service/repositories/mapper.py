"""
Mapping between the domain Patient and the PatientRecord ORM model.

Structural conversion only. Rehydration goes through the validated
constructor and the entity's own deactivate() transition, so a stored
row can never produce a domain object that breaks its invariants.
"""

from patient_service.domain.patient import Patient, PatientStatus
from patient_service.models.patient import PatientRecord


def to_domain(record: PatientRecord) -> Patient:
    """Convert a stored record into a domain patient."""
    patient = Patient(
        record.name,
        record.email,
        record.address,
        record.date_of_birth,
        record.registered_date,
        id=record.id,
    )
    if record.status == PatientStatus.INACTIVE:
        patient.deactivate(record.deactivated_date)
    return patient


def to_record(patient: Patient) -> PatientRecord:
    """Build a new record for a patient that has not been stored yet."""
    record = PatientRecord()
    if patient.id is not None:
        record.id = patient.id
    apply_to_record(patient, record)
    return record


def apply_to_record(patient: Patient, record: PatientRecord) -> None:
    """Copy every domain field onto an existing record."""
    record.name = patient.name
    record.email = patient.email
    record.address = patient.address
    record.date_of_birth = patient.date_of_birth
    record.registered_date = patient.registered_date
    record.status = patient.status
    record.deactivated_date = patient.deactivated_date
