"""
Patient domain model.

Pure domain entity carrying the patient invariants and the
ACTIVE/INACTIVE lifecycle. It has no knowledge of SQLAlchemy, FastAPI
or any other infrastructure; the persistence layer maps to and from it.
"""

from datetime import date
from enum import Enum
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from patient_service.domain.exceptions import (
    AlreadyActiveError,
    AlreadyInactiveError,
    InactivePatientError,
    ValidationError,
)


class PatientStatus(str, Enum):
    """Lifecycle status of a patient record."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    @classmethod
    def from_value(cls, value: str) -> "PatientStatus":
        """
        Parse a status case-insensitively.

        Args:
            value: Status text, e.g. "active" or "INACTIVE"

        Returns:
            PatientStatus instance

        Raises:
            ValidationError: If value names no known status
        """
        for status in cls:
            if status.value.lower() == (value or "").strip().lower():
                return status
        raise ValidationError(f"Invalid patient status: {value}", field="status")


def _require_text(value: str | None, field: str, label: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required", field=field)
    return value


def _require_email(value: str | None) -> str:
    email = _require_text(value, "email", "Email")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError(f"Email is not valid: {e}", field="email") from e
    return email


class Patient:
    """
    A person under care.

    Construction validates every field, so an instance that exists is
    always valid. Two patients are equal when their emails are equal,
    regardless of identifier or any other attribute.

    The date of birth is checked against ``today`` when given, otherwise
    against the system date.
    """

    def __init__(
        self,
        name: str,
        email: str,
        address: str,
        date_of_birth: date,
        registered_date: date,
        *,
        id: UUID | None = None,
        today: date | None = None,
    ):
        self._name = _require_text(name, "name", "Name")
        self._email = _require_email(email)
        self._address = _require_text(address, "address", "Address")
        if date_of_birth is None:
            raise ValidationError("Date of birth is required", field="date_of_birth")
        if registered_date is None:
            raise ValidationError("Registered date is required", field="registered_date")
        if not date_of_birth < (today or date.today()):
            raise ValidationError("Date of birth must be in the past", field="date_of_birth")
        self._date_of_birth = date_of_birth
        self._registered_date = registered_date
        self._id = id
        self._status = PatientStatus.ACTIVE
        self._deactivated_date: date | None = None

    @property
    def id(self) -> UUID | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def address(self) -> str:
        return self._address

    @property
    def date_of_birth(self) -> date:
        return self._date_of_birth

    @property
    def registered_date(self) -> date:
        return self._registered_date

    @property
    def status(self) -> PatientStatus:
        return self._status

    @property
    def deactivated_date(self) -> date | None:
        return self._deactivated_date

    def is_active(self) -> bool:
        """Check if the patient is currently active."""
        return self._status is PatientStatus.ACTIVE

    def deactivate(self, on_date: date) -> None:
        """
        Move the patient to INACTIVE.

        Args:
            on_date: Date recorded as the deactivation date

        Raises:
            AlreadyInactiveError: If the patient is already inactive
            ValidationError: If on_date is None
        """
        if self._status is PatientStatus.INACTIVE:
            raise AlreadyInactiveError()
        if on_date is None:
            raise ValidationError("Deactivation date is required", field="deactivated_date")
        self._status = PatientStatus.INACTIVE
        self._deactivated_date = on_date

    def activate(self) -> None:
        """
        Move the patient back to ACTIVE and clear the deactivation date.

        Raises:
            AlreadyActiveError: If the patient is already active
        """
        if self._status is PatientStatus.ACTIVE:
            raise AlreadyActiveError()
        self._status = PatientStatus.ACTIVE
        self._deactivated_date = None

    def with_changes(
        self,
        name: str,
        email: str,
        address: str,
        date_of_birth: date,
        *,
        today: date | None = None,
    ) -> "Patient":
        """
        Return a new validated patient with the mutable fields replaced.

        The identifier and registered date are carried over. The same
        validation as construction applies to the new values.

        Raises:
            InactivePatientError: If this patient is inactive
            ValidationError: If any new value is invalid
        """
        if not self.is_active():
            raise InactivePatientError(
                f"Cannot update an inactive patient with ID: {self._id}", self._id
            )
        return Patient(
            name,
            email,
            address,
            date_of_birth,
            self._registered_date,
            id=self._id,
            today=today,
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Patient):
            return NotImplemented
        return self._email == other._email

    def __hash__(self) -> int:
        return hash(self._email)

    def __repr__(self) -> str:
        return f"<Patient(id={self._id}, status={self._status.value})>"
