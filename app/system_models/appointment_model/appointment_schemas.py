# app/system_models/appointment_model/appointment_schemas.py
import datetime as dt
from typing import Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from app.system_models.base_schema import CamelModel

APPOINTMENT_STATUS = Literal["scheduled", "completed"]


class Appointment(CamelModel):
    id: str
    patient_id: str
    doctor_id: str
    date: str
    time: str
    reason: str = ""
    status: APPOINTMENT_STATUS = "scheduled"

    @field_validator("reason", mode="before")
    def none_as_empty(cls, v):
        return "" if v is None else v


class AppointmentUpdate(CamelModel):
    doctor_id: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[APPOINTMENT_STATUS] = None


class BookingForm(CamelModel):
    """Patient booking dialog. Every field is required."""

    model_config = ConfigDict(str_strip_whitespace=True)

    doctor_id: str = Field(..., min_length=1)
    date: dt.date
    time: dt.time
    reason: str = Field(..., min_length=1)

    @property
    def date_str(self) -> str:
        return self.date.isoformat()

    @property
    def time_str(self) -> str:
        return self.time.strftime("%H:%M")
