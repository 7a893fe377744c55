class PatientNotFoundError(LookupError):
    """Raised when an operation targets a patient id that is not registered."""
    
    def __init__(self, patient_id: int, detail: str = "Patient not found"):
        self.patient_id = patient_id
        self.detail = detail
        super().__init__(f"{detail}: id={patient_id}")
