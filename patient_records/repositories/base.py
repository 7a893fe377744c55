from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Appointment, Patient

class PatientRepository(ABC):
    """Storage interface for patients and the appointments they own."""
    
    @abstractmethod
    def add_patient(self, patient: Patient) -> None:
        """Store a new patient, assigning its id."""
    
    @abstractmethod
    def update_patient(self, patient: Patient) -> None:
        """Overwrite the demographic fields of a stored patient."""
    
    @abstractmethod
    def get_patient_by_id(self, patient_id: int) -> Optional[Patient]:
        """Return the patient with the given id, or None."""
    
    @abstractmethod
    def get_all_patients(self) -> List[Patient]:
        """Return every stored patient in registration order."""
    
    @abstractmethod
    def add_appointment(self, patient_id: int, appointment: Appointment) -> None:
        """Attach an appointment to a stored patient, assigning its id."""
    
    @abstractmethod
    def get_appointments_by_patient_id(self, patient_id: int) -> List[Appointment]:
        """Return a patient's appointments, or an empty list."""
