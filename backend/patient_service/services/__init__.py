"""Application services for the Patient Service."""

from patient_service.services.patient_lifecycle import PatientLifecycleService

__all__ = ["PatientLifecycleService"]
