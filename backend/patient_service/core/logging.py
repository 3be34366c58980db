"""
Structured logging configuration for the Patient Service.

Provides consistent, structured logging with support for different
output formats and log levels based on environment.
"""

import logging
import sys
from typing import Any
from uuid import UUID

import structlog
from structlog.types import EventDict, Processor


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add application context to log entries."""
    event_dict["app"] = "patient-service"
    return event_dict


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    log_file: str | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output logs as JSON (for production)
        log_file: Optional file path for log output
    """
    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    # Shared processors for all outputs
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_app_context,
    ]

    if json_logs:
        # JSON output for production
        processors: list[Processor] = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # Human-readable output for development
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure file handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
        if json_logs:
            file_handler.setFormatter(logging.Formatter("%(message)s"))
        else:
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog BoundLogger
    """
    return structlog.get_logger(name)


class AuditLogger:
    """
    Specialized logger for patient record changes.

    Only identifiers are logged; names, emails and addresses never
    reach the audit stream.
    """

    def __init__(self):
        """Initialize audit logger."""
        self.logger = get_logger("audit")

    def log_patient_event(
        self,
        action: str,
        patient_id: UUID | str | None,
        success: bool = True,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Log a patient lifecycle event.

        Args:
            action: Action performed (e.g., "CREATE", "DEACTIVATE")
            patient_id: Identifier of the affected patient
            success: Whether the action succeeded
            details: Additional non-PHI details
        """
        log_method = self.logger.info if success else self.logger.warning
        log_method(
            f"patient_{action.lower()}",
            patient_id=str(patient_id) if patient_id else None,
            action=action,
            success=success,
            details=details or {},
            audit_type="patient",
        )


# Global audit logger instance
audit_logger = AuditLogger()
