"""API v1 endpoints."""

from patient_service.api.v1.endpoints import patients

__all__ = [
    "patients",
]
