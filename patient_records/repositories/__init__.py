"""
Patient repositories.

Services depend on the ``PatientRepository`` interface; the in-memory
implementation is the only one shipped.
"""
from .base import PatientRepository
from .memory import InMemoryPatientRepository

__all__ = ["PatientRepository", "InMemoryPatientRepository"]
