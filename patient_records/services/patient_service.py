import logging
from typing import List, Optional

from ..models import Appointment, Patient
from ..repositories import PatientRepository

logger = logging.getLogger(__name__)

class PatientService:
    def __init__(self, repository: PatientRepository):
        self.repository = repository
    
    def register_patient(self, patient: Patient) -> None:
        """Register a new patient."""
        self.repository.add_patient(patient)
        logger.info(f"Registered patient {patient.id}")
    
    def update_patient_details(self, patient: Patient) -> None:
        """Update a registered patient's details."""
        logger.info(f"Updating patient {patient.id}")
        self.repository.update_patient(patient)
    
    def get_patient_information(self, patient_id: int) -> Optional[Patient]:
        """Get a patient by id."""
        return self.repository.get_patient_by_id(patient_id)
    
    def get_all_patients(self) -> List[Patient]:
        """List all registered patients."""
        return self.repository.get_all_patients()
    
    def schedule_appointment(self, patient_id: int, appointment: Appointment) -> None:
        """Schedule an appointment for a patient."""
        logger.info(f"Scheduling appointment for patient {patient_id}")
        self.repository.add_appointment(patient_id, appointment)
    
    def get_patient_appointments(self, patient_id: int) -> List[Appointment]:
        """List a patient's appointments."""
        return self.repository.get_appointments_by_patient_id(patient_id)
