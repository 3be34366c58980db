"""
Patient Service Backend - Patient registry API

This module provides the backend services for the patient registry,
including patient registration, updates, deactivation and the
persistence and HTTP layers around them.
"""

__version__ = "1.0.0"
__author__ = "Patient Service Team"
