from datetime import date, datetime
from typing import List
import logging

from .core.config import settings
from .models import Appointment, Patient
from .repositories import InMemoryPatientRepository
from .services import PatientService

logger = logging.getLogger(__name__)

def run_demo(service: PatientService) -> List[str]:
    """Register a patient, update them, book a visit and report back."""
    lines = []
    
    # Register a new patient
    patient = Patient(
        first_name="John",
        last_name="Doe",
        date_of_birth=date(1985, 5, 20),
        gender="Male",
        address="123 Main St",
        phone_number="555-1234"
    )
    service.register_patient(patient)
    
    # Update patient details
    patient.address = "456 Oak St"
    service.update_patient_details(patient)
    
    # Schedule an appointment
    appointment = Appointment(
        date=datetime(2024, 10, 1, 14, 0, 0),
        doctor="Dr. Smith",
        department="Cardiology",
        notes="Regular check-up"
    )
    service.schedule_appointment(patient.id, appointment)
    
    # Retrieve patient information
    retrieved = service.get_patient_information(patient.id)
    lines.append(f"Patient: {retrieved.full_name}, Address: {retrieved.address}")
    
    # List all appointments
    for app in service.get_patient_appointments(patient.id):
        lines.append(
            f"Appointment with {app.doctor} on {app.date}, "
            f"Department: {app.department}"
        )
    
    return lines

def main():
    """Console entry point for the demo scenario."""
    logging.basicConfig(level=settings.log_level)
    logger.info(f"Starting {settings.APP_NAME} {settings.VERSION}...")
    
    service = PatientService(InMemoryPatientRepository())
    for line in run_demo(service):
        print(line)
    
    logger.info("Demo complete")

if __name__ == "__main__":
    main()
