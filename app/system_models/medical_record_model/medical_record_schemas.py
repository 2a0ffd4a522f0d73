# app/system_models/medical_record_model/medical_record_schemas.py
from typing import Optional

from pydantic import field_validator

from app.system_models.base_schema import CamelModel


class MedicalRecord(CamelModel):
    id: str
    patient_id: str
    doctor_id: str
    date: str = ""
    diagnosis: str
    prescription: str = ""
    lab_results: Optional[str] = None
    notes: Optional[str] = None
    pdf_report: Optional[str] = None  # URL

    @field_validator("date", "prescription", mode="before")
    def none_as_empty(cls, v):
        return "" if v is None else v


class MedicalRecordUpdate(CamelModel):
    date: Optional[str] = None
    diagnosis: Optional[str] = None
    prescription: Optional[str] = None
    lab_results: Optional[str] = None
    notes: Optional[str] = None
    pdf_report: Optional[str] = None
