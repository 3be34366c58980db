"""
Domain Layer

Patient entity, lifecycle rules and the persistence port, kept free of
database and web framework imports.
"""

from patient_service.domain.exceptions import (
    AlreadyActiveError,
    AlreadyInactiveError,
    DuplicateEmailError,
    InactivePatientError,
    NotFoundError,
    PatientRegistryError,
    ValidationError,
)
from patient_service.domain.gateway import PatientGateway
from patient_service.domain.patient import Patient, PatientStatus
from patient_service.domain.uniqueness import validate_email_unique

__all__ = [
    "Patient",
    "PatientStatus",
    "PatientGateway",
    "validate_email_unique",
    "PatientRegistryError",
    "ValidationError",
    "DuplicateEmailError",
    "NotFoundError",
    "InactivePatientError",
    "AlreadyActiveError",
    "AlreadyInactiveError",
]
