from .appointment import Appointment
from .patient import Patient

__all__ = ["Appointment", "Patient"]
