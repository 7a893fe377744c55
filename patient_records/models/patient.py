from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from .appointment import Appointment

class Patient(BaseModel):
    # Assigned by the repository on registration, immutable afterwards
    id: Optional[int] = None
    
    # Personal information
    first_name: str
    last_name: str
    date_of_birth: date
    gender: Optional[str] = None
    
    # Contact information
    address: Optional[str] = None
    phone_number: Optional[str] = None
    
    # Owned appointments, in scheduling order
    appointments: List[Appointment] = Field(default_factory=list)
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
    
    def __repr__(self):
        return f"<Patient(id={self.id}, name='{self.full_name}')>"
