"""Patient management endpoints for the Patient Service."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from patient_service.models.base import get_db
from patient_service.repositories.patient_repository import SqlAlchemyPatientRepository
from patient_service.schemas.patient import PatientRequest, PatientResponse
from patient_service.services.patient_lifecycle import PatientLifecycleService

router = APIRouter()


def get_patient_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PatientLifecycleService:
    """Build a lifecycle service bound to the request's session."""
    return PatientLifecycleService(SqlAlchemyPatientRepository(db))


PatientServiceDep = Annotated[PatientLifecycleService, Depends(get_patient_service)]


@router.get("", response_model=list[PatientResponse])
async def list_patients(service: PatientServiceDep) -> list[PatientResponse]:
    """List all patients."""
    return await service.list_patients()


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(patient_id: UUID, service: PatientServiceDep) -> PatientResponse:
    """Get patient information."""
    return await service.get(patient_id)


@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def create_patient(
    payload: PatientRequest, service: PatientServiceDep
) -> PatientResponse:
    """Register a new patient."""
    return await service.create(payload)


@router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient(
    patient_id: UUID, payload: PatientRequest, service: PatientServiceDep
) -> PatientResponse:
    """Update an active patient's details."""
    return await service.update(patient_id, payload)


@router.put("/{patient_id}/deactivate", status_code=status.HTTP_204_NO_CONTENT)
async def deactivate_patient(patient_id: UUID, service: PatientServiceDep) -> None:
    """Deactivate a patient.

    The patient stays in the database but can no longer be updated.
    """
    await service.deactivate(patient_id)


@router.put("/{patient_id}/activate", status_code=status.HTTP_204_NO_CONTENT)
async def activate_patient(patient_id: UUID, service: PatientServiceDep) -> None:
    """Reactivate a previously deactivated patient."""
    await service.activate(patient_id)


@router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_patient(patient_id: UUID, service: PatientServiceDep) -> None:
    """Delete a patient permanently."""
    await service.delete(patient_id)
