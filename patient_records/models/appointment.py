from datetime import datetime
from typing import Optional

from pydantic import BaseModel

class Appointment(BaseModel):
    # Assigned by the repository, unique within the owning patient only
    id: Optional[int] = None
    
    # Appointment details
    date: datetime
    doctor: str
    department: str
    notes: Optional[str] = None
    
    def __repr__(self):
        return f"<Appointment(id={self.id}, doctor='{self.doctor}', date='{self.date}')>"
