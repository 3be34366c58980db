"""
Database models for the Patient Service.

This module exports all SQLAlchemy models and database utilities.
"""

from patient_service.models.base import Base, async_session_maker, engine, get_db
from patient_service.models.patient import PatientRecord

__all__ = [
    "Base",
    "get_db",
    "engine",
    "async_session_maker",
    "PatientRecord",
]
