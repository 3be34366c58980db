"""
Domain exceptions for the patient registry.

Every error raised by the domain and lifecycle layers derives from
PatientRegistryError so the transport layer can map it to a response
without knowing how it was produced.
"""

from uuid import UUID


class PatientRegistryError(Exception):
    """Base exception for all patient registry errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(PatientRegistryError):
    """Raised when a patient field is missing, blank or out of range"""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, details)


class DuplicateEmailError(PatientRegistryError):
    """Raised when an email is already registered to another patient"""

    def __init__(self, email: str):
        super().__init__(f"A patient with this email {email} already exists", {"email": email})


class NotFoundError(PatientRegistryError):
    """Raised when no patient exists for an identifier"""

    def __init__(self, patient_id: UUID):
        super().__init__(
            f"Patient not found with ID: {patient_id}", {"patient_id": str(patient_id)}
        )


class InactivePatientError(PatientRegistryError):
    """Raised when mutating or re-deactivating an inactive patient"""

    def __init__(self, message: str, patient_id: UUID | None = None):
        details = {"patient_id": str(patient_id)} if patient_id else {}
        super().__init__(message, details)


class AlreadyActiveError(PatientRegistryError):
    """Raised when activating a patient that is already active"""

    def __init__(self, message: str = "Patient is already active"):
        super().__init__(message)


class AlreadyInactiveError(PatientRegistryError):
    """Raised by the entity when deactivating a patient that is already inactive"""

    def __init__(self, message: str = "Patient is already inactive"):
        super().__init__(message)
