"""Version 1 of the Patient Service API."""
