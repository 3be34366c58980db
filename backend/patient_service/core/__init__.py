"""Core configuration and utilities for the Patient Service backend."""

from patient_service.core.config import settings
from patient_service.core.logging import get_logger, setup_logging

__all__ = ["settings", "setup_logging", "get_logger"]
