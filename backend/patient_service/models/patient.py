"""
Patient database model.

Storage-side representation of a patient. Never handed to the domain or
service layers; the repository maps it to and from the domain Patient.
"""

import uuid
from datetime import date
from typing import Optional

from sqlalchemy import CheckConstraint, Date, Enum, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from patient_service.domain.patient import PatientStatus
from patient_service.models.base import Base


class PatientRecord(Base):
    """
    Persisted patient row.

    The unique constraint on email is the authoritative uniqueness guard;
    the service-level check only provides an earlier, friendlier error.
    """

    __tablename__ = "patients"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(String(256), nullable=False)

    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)

    address: Mapped[str] = mapped_column(String(512), nullable=False)

    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)

    registered_date: Mapped[date] = mapped_column(Date, nullable=False)

    status: Mapped[PatientStatus] = mapped_column(
        Enum(PatientStatus, name="patientstatus"),
        nullable=False,
        default=PatientStatus.ACTIVE,
    )

    # Set only while status is INACTIVE
    deactivated_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    __table_args__ = (
        Index("ix_patients_name", "name"),
        Index("ix_patients_status", "status"),
        CheckConstraint(
            "(status = 'INACTIVE') = (deactivated_date IS NOT NULL)",
            name="deactivated_date_matches_status",
        ),
    )

    def __repr__(self) -> str:
        return f"<PatientRecord(id={self.id}, status='{self.status}')>"
