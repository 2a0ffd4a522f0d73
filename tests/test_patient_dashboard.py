# tests/test_patient_dashboard.py
import asyncio
import datetime as dt

import pytest

from app.dashboards.header import build_header, role_color
from app.dashboards.patient_dashboard import PatientDashboard, day_name
from app.system_models.appointment_model.appointment_schemas import BookingForm
from app.system_models.availability_model.availability_schemas import DoctorAvailability
from app.users.user_models.schemas import User


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def dashboard(api, patient):
    return run(PatientDashboard(api, patient).load())


def _form(**overrides):
    data = {"doctorId": "d1", "date": "2024-05-01", "time": "09:00", "reason": "checkup"}
    data.update(overrides)
    return BookingForm.model_validate(data)


# ============================================================================
# LOADING AND FILTERING
# ============================================================================
def test_only_session_patients_appointments_are_shown(dashboard, api):
    expected = {a["id"] for a in api.appointments.items if a["patientId"] == "p1"}

    assert {a.id for a in dashboard.appointments} == expected
    assert all(a.patient_id == "p1" for a in dashboard.appointments)


def test_other_patient_sees_their_own(api):
    sam = User.model_validate(next(u for u in api.users.items if u["id"] == "p2"))
    other = run(PatientDashboard(api, sam).load())

    assert {a.id for a in other.appointments} == {"a3"}
    assert {r.id for r in other.medical_records} == {"r2"}


def test_foreign_malformed_records_do_not_hide_own_data(api, patient):
    api.appointments.items += [
        {"id": "a5", "patientId": "p2", "doctorId": "d1", "date": "2024-07-01",
         "time": "10:00", "reason": None, "status": "scheduled"},
        {"id": "a6", "patientId": "p2", "doctorId": "d2", "date": "2024-07-02",
         "time": "11:00", "reason": "x", "status": "cancelled"},
    ]
    api.medical_records.items.append(
        {"id": "r3", "patientId": "p2", "doctorId": "d1", "prescription": None}
    )

    loaded = run(PatientDashboard(api, patient).load())

    assert {a.id for a in loaded.appointments} == {"a1", "a2", "a4"}
    assert {r.id for r in loaded.medical_records} == {"r1"}


def test_doctors_and_records_filtered(dashboard):
    assert {d.id for d in dashboard.doctors} == {"d1", "d2"}
    assert {r.id for r in dashboard.medical_records} == {"r1"}


def test_upcoming_and_past_split_by_status(dashboard):
    assert {a.id for a in dashboard.upcoming_appointments} == {"a1", "a4"}
    assert {a.id for a in dashboard.past_appointments} == {"a2"}


def test_doctor_lookup_by_id(dashboard):
    assert dashboard.find_doctor("d2").last_name == "Cuddy"
    assert dashboard.find_doctor("n1") is None
    assert dashboard.doctor_display_name("d1") == "Dr. Gregory House"
    assert dashboard.doctor_display_name("gone") == "Dr. N/A"


def test_unknown_doctor_availability_is_default_shape(dashboard):
    availability = dashboard.availability_for("nobody")

    assert availability == DoctorAvailability()
    assert availability.model_dump(by_alias=True) == {"leaveDates": [], "slots": []}


def test_known_doctor_availability(dashboard):
    availability = dashboard.availability_for("d1")

    assert availability.leave_dates == ["2024-05-10", "2024-05-11"]
    assert len(availability.slots) == 2


def test_load_survives_total_fetch_failure(api, patient):
    api.fail_all_reads()

    dashboard = run(PatientDashboard(api, patient).load())

    assert dashboard.doctors == []
    assert dashboard.appointments == []
    assert dashboard.medical_records == []
    assert dashboard.doctor_availability == {}


def test_load_survives_partial_fetch_failure(api, patient):
    api.users.fail_reads = True

    dashboard = run(PatientDashboard(api, patient).load())

    assert dashboard.doctors == []
    assert len(dashboard.appointments) == 3
    assert dashboard.doctor_display_name("d1") == "Dr. N/A"


def test_reload_replaces_previous_state(dashboard, api):
    api.appointments.items = []

    run(dashboard.load())

    assert dashboard.appointments == []


# ============================================================================
# BOOKING
# ============================================================================
def test_booking_creates_scheduled_appointment_for_session_user(dashboard, api):
    before = len(dashboard.appointments)

    assert run(dashboard.book_appointment(_form()))

    created = api.appointments.created[-1]
    assert created["patientId"] == "p1"
    assert created["doctorId"] == "d1"
    assert created["date"] == "2024-05-01"
    assert created["time"] == "09:00"
    assert created["reason"] == "checkup"
    assert created["status"] == "scheduled"
    assert created["id"].isdigit()

    assert len(dashboard.appointments) == before + 1
    assert dashboard.toasts[-1].type == "success"
    assert dashboard.toasts[-1].message == "Appointment booked successfully"


def test_booking_failure_never_shows_success(dashboard, api):
    api.appointments.fail_writes = True
    before = [a.id for a in dashboard.appointments]

    assert not run(dashboard.book_appointment(_form()))

    assert [t.message for t in dashboard.toasts] == ["Failed to book appointment"]
    assert [a.id for a in dashboard.appointments] == before


def test_booking_does_not_check_leave_dates(dashboard, api):
    # d1 is on leave this day; nothing in this layer prevents the booking
    assert run(dashboard.book_appointment(_form(date="2024-05-10")))
    assert api.appointments.created[-1]["date"] == "2024-05-10"


def test_booking_form_requires_every_field():
    with pytest.raises(ValueError):
        _form(reason="   ")
    with pytest.raises(ValueError):
        _form(doctorId="")
    with pytest.raises(ValueError):
        BookingForm.model_validate({"doctorId": "d1", "reason": "x"})


def test_booking_form_formats_date_and_time():
    form = BookingForm(doctor_id="d1", date=dt.date(2024, 5, 1), time=dt.time(9, 0), reason="x")
    assert form.date_str == "2024-05-01"
    assert form.time_str == "09:00"


# ============================================================================
# CANCELLATION
# ============================================================================
def test_cancel_removes_exactly_that_appointment(dashboard):
    before = {a.id for a in dashboard.appointments}

    assert run(dashboard.cancel_appointment("a1", confirmed=True))

    after = {a.id for a in dashboard.appointments}
    assert after == before - {"a1"}
    assert len(after) == len(before) - 1
    assert dashboard.toasts[-1].message == "Appointment cancelled successfully"


def test_cancel_without_confirmation_does_nothing(dashboard, api):
    count = len(api.appointments.items)

    assert not run(dashboard.cancel_appointment("a1", confirmed=False))

    assert len(api.appointments.items) == count
    assert dashboard.toasts == []


def test_cancel_failure_shows_error_toast(dashboard, api):
    api.appointments.fail_writes = True

    assert not run(dashboard.cancel_appointment("a1", confirmed=True))

    assert [t.message for t in dashboard.toasts] == ["Failed to cancel appointment"]
    assert "a1" in {a.id for a in dashboard.appointments}


# ============================================================================
# VIEW MODELS
# ============================================================================
def test_day_names():
    assert day_name(0) == "Sunday"
    assert day_name(6) == "Saturday"
    assert day_name(9) == "Unknown"


def test_doctor_info_dialog(dashboard):
    dialog = dashboard.doctor_info("d1")

    assert dialog.name == "Dr. Gregory House"
    assert dialog.specialization == "Diagnostics"
    assert [(s.day, s.start_time, s.end_time) for s in dialog.slots] == [
        ("Monday", "09:00", "12:00"),
        ("Wednesday", "13:00", "17:00"),
    ]
    assert dialog.leave_dates == ["2024-05-10", "2024-05-11"]

    assert dashboard.doctor_info("d2").slots == []
    assert dashboard.doctor_info("p2") is None


def test_build_view(dashboard):
    view = dashboard.build_view()

    assert view.summary.blood_type == "O+"
    assert view.summary.upcoming_appointments == 2
    assert view.summary.medical_records == 1
    assert view.personal_info.full_name == "Jane Doe"
    assert view.personal_info.date_of_birth == "1990-04-12"

    rows = {r.id: r for r in view.tabs.appointments.upcoming}
    assert rows["a1"].doctor == "Dr. Gregory House"
    assert rows["a4"].doctor == "Dr. N/A"
    assert [r.id for r in view.tabs.appointments.past] == ["a2"]

    cards = {c.id: c for c in view.tabs.doctors}
    assert cards["d2"].phone == "N/A"
    assert cards["d1"].specialization == "Diagnostics"

    record = view.tabs.records[0]
    assert record.doctor == "Dr. Gregory House"
    assert record.notes is None
    assert record.pdf_report == "https://files.example.com/r1.pdf"


def test_missing_personal_fields_render_na(api):
    sam = User.model_validate(next(u for u in api.users.items if u["id"] == "p2"))
    view = run(PatientDashboard(api, sam).load()).build_view()

    assert view.summary.blood_type == "N/A"
    assert view.summary.emergency_contact == "N/A"
    assert view.personal_info.phone == "N/A"


def test_header(patient, doctor):
    header = build_header(patient)
    assert header.full_name == "Jane Doe"
    assert header.role_label == "Patient"
    assert header.role_color == "green"

    assert build_header(doctor).role_color == "blue"
    assert role_color("admin") == "red"
    assert role_color("nurse") == "purple"
    assert role_color("visitor") == "gray"
