"""
Persistence Gateway Interface

Abstract port the lifecycle service depends on. The SQLAlchemy
repository is the production implementation; tests may substitute
their own.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from patient_service.domain.patient import Patient


class PatientGateway(ABC):
    """Durable store of patients keyed by identifier."""

    @abstractmethod
    async def save(self, patient: Patient) -> Patient:
        """
        Persist a patient.

        Assigns an identifier when the patient has none; otherwise
        overwrites the stored record with the same identifier.

        Returns:
            The persisted patient, carrying its identifier

        Raises:
            DuplicateEmailError: If the storage uniqueness constraint rejects the email
            NotFoundError: If an identified patient no longer exists
        """

    @abstractmethod
    async def find_by_id(self, patient_id: UUID) -> Patient | None:
        """Load a patient, or None if absent."""

    @abstractmethod
    async def find_all(self) -> list[Patient]:
        """Load every stored patient."""

    @abstractmethod
    async def delete(self, patient_id: UUID) -> None:
        """Remove a patient. Missing identifiers are ignored."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether any patient uses this email."""

    @abstractmethod
    async def exists_by_email_and_id_not(self, email: str, patient_id: UUID) -> bool:
        """Check whether a patient other than patient_id uses this email."""
