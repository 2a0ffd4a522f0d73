# app/system_models/availability_model/availability_schemas.py
from typing import Dict, List

from pydantic import Field

from app.system_models.base_schema import CamelModel


class TimeSlot(CamelModel):
    """Recurring weekly window. day_of_week: 0 = Sunday ... 6 = Saturday."""

    day_of_week: int
    start_time: str
    end_time: str


class DoctorAvailability(CamelModel):
    leave_dates: List[str] = Field(default_factory=list)
    slots: List[TimeSlot] = Field(default_factory=list)


# doctor_id -> availability
AvailabilityMap = Dict[str, DoctorAvailability]
