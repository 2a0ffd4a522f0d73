# app/dashboards/patient_dashboard.py
"""
Patient Dashboard
Load -> filter -> render -> mutate -> reload over the storage facade.
"""
import asyncio
import logging
from typing import Dict, List, Optional

from app.clinic_api.api_client import ClinicAPIClient
from app.dashboards.dashboard_schemas import (
    NOT_AVAILABLE,
    AppointmentRow,
    AppointmentsTab,
    DashboardTabs,
    DoctorCard,
    DoctorInfoDialog,
    MedicalRecordEntry,
    PatientDashboardView,
    PersonalInfo,
    SlotRow,
    SummaryCards,
    Toast,
)
from app.helpers.time import now_millis
from app.storage.appointment_storage import add_appointment, delete_appointment, get_appointments
from app.storage.availability_storage import get_doctor_availability
from app.storage.medical_record_storage import get_medical_records
from app.storage.user_storage import get_users
from app.system_models.appointment_model.appointment_schemas import Appointment, BookingForm
from app.system_models.availability_model.availability_schemas import (
    AvailabilityMap,
    DoctorAvailability,
)
from app.system_models.medical_record_model.medical_record_schemas import MedicalRecord
from app.users.user_models.schemas import User

logger = logging.getLogger(__name__)

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def day_name(day_of_week: int) -> str:
    if 0 <= day_of_week < len(DAY_NAMES):
        return DAY_NAMES[day_of_week]
    return "Unknown"


def _or_na(value: Optional[str]) -> str:
    return value or NOT_AVAILABLE


class PatientDashboard:
    """State of one patient's dashboard. The last successful load replaces everything."""

    def __init__(self, api: ClinicAPIClient, current_user: User):
        self.api = api
        self.current_user = current_user

        self.doctors: List[User] = []
        self.appointments: List[Appointment] = []
        self.medical_records: List[MedicalRecord] = []
        self.doctor_availability: AvailabilityMap = {}
        self._doctor_index: Dict[str, User] = {}

        self.toasts: List[Toast] = []

    # ========================================================================
    # LOADING
    # ========================================================================
    async def load(self) -> "PatientDashboard":
        # Every facade read swallows its own failure, so one bad fetch cannot abort the join
        users, appointments, records, availability = await asyncio.gather(
            get_users(self.api),
            get_appointments(self.api),
            get_medical_records(self.api),
            get_doctor_availability(self.api),
        )

        patient_id = self.current_user.id
        self.doctors = [u for u in users if u.role == "doctor"]
        self._doctor_index = {d.id: d for d in self.doctors}
        self.appointments = [a for a in appointments if a.patient_id == patient_id]
        self.medical_records = [r for r in records if r.patient_id == patient_id]
        self.doctor_availability = availability

        logger.debug(
            f"Loaded dashboard for {patient_id}: {len(self.appointments)} appointments, "
            f"{len(self.medical_records)} records, {len(self.doctors)} doctors"
        )
        return self

    # ========================================================================
    # DERIVED DATA
    # ========================================================================
    @property
    def upcoming_appointments(self) -> List[Appointment]:
        return [a for a in self.appointments if a.status == "scheduled"]

    @property
    def past_appointments(self) -> List[Appointment]:
        return [a for a in self.appointments if a.status == "completed"]

    def find_doctor(self, doctor_id: str) -> Optional[User]:
        return self._doctor_index.get(doctor_id)

    def doctor_display_name(self, doctor_id: str) -> str:
        doctor = self.find_doctor(doctor_id)
        return f"Dr. {doctor.full_name if doctor else NOT_AVAILABLE}"

    def availability_for(self, doctor_id: str) -> DoctorAvailability:
        return self.doctor_availability.get(doctor_id) or DoctorAvailability()

    # ========================================================================
    # ACTIONS
    # ========================================================================
    def _toast(self, kind: str, message: str) -> Toast:
        toast = Toast(type=kind, message=message)
        self.toasts.append(toast)
        return toast

    async def book_appointment(self, form: BookingForm) -> bool:
        appointment = Appointment(
            id=str(now_millis()),
            patient_id=self.current_user.id,
            doctor_id=form.doctor_id,
            date=form.date_str,
            time=form.time_str,
            status="scheduled",
            reason=form.reason,
        )
        # No availability or double-booking check happens before submission
        try:
            await add_appointment(self.api, appointment)
        except Exception:
            self._toast("error", "Failed to book appointment")
            return False

        logger.info(f"Patient {self.current_user.id} booked appointment {appointment.id}")
        self._toast("success", "Appointment booked successfully")
        await self.load()
        return True

    async def cancel_appointment(self, appointment_id: str, confirmed: bool) -> bool:
        """Hard delete; nothing happens unless the patient confirmed."""
        if not confirmed:
            return False
        try:
            await delete_appointment(self.api, appointment_id)
        except Exception:
            self._toast("error", "Failed to cancel appointment")
            return False

        logger.info(f"Patient {self.current_user.id} cancelled appointment {appointment_id}")
        self._toast("success", "Appointment cancelled successfully")
        await self.load()
        return True

    # ========================================================================
    # VIEW MODELS
    # ========================================================================
    def _appointment_row(self, appointment: Appointment) -> AppointmentRow:
        return AppointmentRow(
            id=appointment.id,
            date=appointment.date,
            time=appointment.time,
            doctor=self.doctor_display_name(appointment.doctor_id),
            reason=appointment.reason,
            status=appointment.status,
        )

    def _doctor_card(self, doctor: User) -> DoctorCard:
        return DoctorCard(
            id=doctor.id,
            name=f"Dr. {doctor.full_name}",
            specialization=doctor.specialization or "",
            email=doctor.email,
            phone=_or_na(doctor.phone),
        )

    def _record_entry(self, record: MedicalRecord) -> MedicalRecordEntry:
        return MedicalRecordEntry(
            id=record.id,
            diagnosis=record.diagnosis,
            date=record.date,
            doctor=self.doctor_display_name(record.doctor_id),
            prescription=record.prescription,
            lab_results=record.lab_results or None,
            notes=record.notes or None,
            pdf_report=record.pdf_report or None,
        )

    def doctor_info(self, doctor_id: str) -> Optional[DoctorInfoDialog]:
        doctor = self.find_doctor(doctor_id)
        if doctor is None:
            return None
        availability = self.availability_for(doctor_id)
        return DoctorInfoDialog(
            id=doctor.id,
            name=f"Dr. {doctor.full_name}",
            specialization=doctor.specialization or "",
            slots=[
                SlotRow(day=day_name(s.day_of_week), start_time=s.start_time, end_time=s.end_time)
                for s in availability.slots
            ],
            leave_dates=list(availability.leave_dates),
        )

    def build_view(self) -> PatientDashboardView:
        user = self.current_user
        return PatientDashboardView(
            summary=SummaryCards(
                blood_type=_or_na(user.blood_type),
                upcoming_appointments=len(self.upcoming_appointments),
                medical_records=len(self.medical_records),
                emergency_contact=_or_na(user.emergency_contact),
            ),
            personal_info=PersonalInfo(
                full_name=user.full_name,
                email=user.email,
                phone=_or_na(user.phone),
                date_of_birth=_or_na(user.date_of_birth),
                blood_type=_or_na(user.blood_type),
                emergency_contact=_or_na(user.emergency_contact),
            ),
            tabs=DashboardTabs(
                appointments=AppointmentsTab(
                    upcoming=[self._appointment_row(a) for a in self.upcoming_appointments],
                    past=[self._appointment_row(a) for a in self.past_appointments],
                ),
                doctors=[self._doctor_card(d) for d in self.doctors],
                records=[self._record_entry(r) for r in self.medical_records],
            ),
        )
