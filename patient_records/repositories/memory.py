import logging
from typing import List, Optional

from ..core.config import settings
from ..core.exceptions import PatientNotFoundError
from ..models import Appointment, Patient
from .base import PatientRepository

logger = logging.getLogger(__name__)

# Fields copied by update_patient; id and appointments are never overwritten
UPDATABLE_FIELDS = (
    "first_name",
    "last_name",
    "date_of_birth",
    "gender",
    "address",
    "phone_number",
)

class InMemoryPatientRepository(PatientRepository):
    """List-backed repository.
    
    Patient ids are ``max(existing) + 1`` or 1 on an empty store. Appointment
    ids follow the same rule scoped to the owning patient.
    
    By default, writes against an unknown patient id are ignored. With
    ``strict=True`` they raise ``PatientNotFoundError`` instead.
    """
    
    def __init__(self, strict: Optional[bool] = None):
        self._patients: List[Patient] = []
        self.strict = settings.STRICT_PATIENT_LOOKUPS if strict is None else strict
    
    def add_patient(self, patient: Patient) -> None:
        patient.id = _next_id(p.id for p in self._patients)
        self._patients.append(patient)
        logger.debug(f"Stored patient {patient.id}")
    
    def update_patient(self, patient: Patient) -> None:
        existing = self.get_patient_by_id(patient.id)
        if existing is None:
            self._handle_missing_patient(patient.id, "update")
            return
        
        for field in UPDATABLE_FIELDS:
            setattr(existing, field, getattr(patient, field))
    
    def get_patient_by_id(self, patient_id: int) -> Optional[Patient]:
        return next((p for p in self._patients if p.id == patient_id), None)
    
    def get_all_patients(self) -> List[Patient]:
        return list(self._patients)
    
    def add_appointment(self, patient_id: int, appointment: Appointment) -> None:
        patient = self.get_patient_by_id(patient_id)
        if patient is None:
            self._handle_missing_patient(patient_id, "add appointment")
            return
        
        appointment.id = _next_id(a.id for a in patient.appointments)
        patient.appointments.append(appointment)
        logger.debug(f"Stored appointment {appointment.id} for patient {patient_id}")
    
    def get_appointments_by_patient_id(self, patient_id: int) -> List[Appointment]:
        patient = self.get_patient_by_id(patient_id)
        if patient is None:
            return []
        return list(patient.appointments)
    
    def _handle_missing_patient(self, patient_id: int, operation: str):
        """Raise in strict mode, otherwise log and ignore."""
        if self.strict:
            raise PatientNotFoundError(patient_id)
        logger.warning(f"Ignoring {operation} for unknown patient {patient_id}")

def _next_id(ids) -> int:
    return max(ids, default=0) + 1
