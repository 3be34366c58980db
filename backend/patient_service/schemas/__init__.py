"""Pydantic schemas shared by the service and API layers."""

from patient_service.schemas.patient import PatientRequest, PatientResponse

__all__ = ["PatientRequest", "PatientResponse"]
