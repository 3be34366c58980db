"""
Repository Layer

Persistence adapters implementing the domain gateway.
"""

from patient_service.repositories.patient_repository import SqlAlchemyPatientRepository

__all__ = ["SqlAlchemyPatientRepository"]
