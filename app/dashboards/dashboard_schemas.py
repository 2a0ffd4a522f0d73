# app/dashboards/dashboard_schemas.py
"""
View models for the patient dashboard.
Shapes mirror what the browser shell renders: summary cards, personal info,
three tabs (appointments, doctors, records) and the doctor info dialog.
"""
from typing import List, Literal, Optional

from pydantic import Field

from app.system_models.base_schema import CamelModel

NOT_AVAILABLE = "N/A"


class Toast(CamelModel):
    type: Literal["success", "error"]
    message: str


class SummaryCards(CamelModel):
    blood_type: str
    upcoming_appointments: int
    medical_records: int
    emergency_contact: str


class PersonalInfo(CamelModel):
    full_name: str
    email: str
    phone: str
    date_of_birth: str
    blood_type: str
    emergency_contact: str


class AppointmentRow(CamelModel):
    id: str
    date: str
    time: str
    doctor: str  # "Dr. First Last" or "Dr. N/A"
    reason: str
    status: str


class AppointmentsTab(CamelModel):
    upcoming: List[AppointmentRow] = Field(default_factory=list)
    past: List[AppointmentRow] = Field(default_factory=list)


class DoctorCard(CamelModel):
    id: str
    name: str
    specialization: str
    email: str
    phone: str


class MedicalRecordEntry(CamelModel):
    id: str
    diagnosis: str
    date: str
    doctor: str
    prescription: str
    lab_results: Optional[str] = None
    notes: Optional[str] = None
    pdf_report: Optional[str] = None


class SlotRow(CamelModel):
    day: str
    start_time: str
    end_time: str


class DoctorInfoDialog(CamelModel):
    id: str
    name: str
    specialization: str
    slots: List[SlotRow] = Field(default_factory=list)
    leave_dates: List[str] = Field(default_factory=list)


class DashboardTabs(CamelModel):
    appointments: AppointmentsTab
    doctors: List[DoctorCard]
    records: List[MedicalRecordEntry]


class PatientDashboardView(CamelModel):
    summary: SummaryCards
    personal_info: PersonalInfo
    tabs: DashboardTabs


class DashboardActionResponse(CamelModel):
    toast: Toast
    dashboard: PatientDashboardView


class HeaderView(CamelModel):
    full_name: str
    role: str
    role_label: str
    role_color: str
    logout_action: str
