# app/dashboards/routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.clinic_api.api_client import ClinicAPIClient
from app.dashboards.dashboard_schemas import (
    DashboardActionResponse,
    DoctorInfoDialog,
    HeaderView,
    PatientDashboardView,
)
from app.dashboards.header import build_header
from app.dashboards.patient_dashboard import PatientDashboard
from app.system_models.appointment_model.appointment_schemas import BookingForm
from app.users.dependencies import get_api_client, get_current_patient, get_current_user
from app.users.user_models.schemas import User

logger = logging.getLogger(__name__)

# Mounted under /api
router = APIRouter()

# Mounted under /api/patient
patient_router = APIRouter()


async def _loaded_dashboard(api: ClinicAPIClient, user: User) -> PatientDashboard:
    return await PatientDashboard(api, user).load()


def _action_response(dashboard: PatientDashboard) -> DashboardActionResponse:
    toast = dashboard.toasts[-1]
    if toast.type == "error":
        # Not found / conflict / unauthorised all collapse to the same notice
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=toast.message)
    return DashboardActionResponse(toast=toast, dashboard=dashboard.build_view())


@router.get("/header", response_model=HeaderView)
async def header(user: User = Depends(get_current_user)):
    return build_header(user)


@router.get("/dashboard", response_model=PatientDashboardView)
async def dashboard_for_role(
    user: User = Depends(get_current_user),
    api: ClinicAPIClient = Depends(get_api_client),
):
    """Role dispatch. Only the patient dashboard exists in this layer."""
    if user.role != "patient":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Dashboard not available for role '{user.role}'",
        )
    return (await _loaded_dashboard(api, user)).build_view()


# ============================================================
# ✅ PATIENT DASHBOARD
# ============================================================
@patient_router.get("/dashboard", response_model=PatientDashboardView)
async def patient_dashboard(
    user: User = Depends(get_current_patient),
    api: ClinicAPIClient = Depends(get_api_client),
):
    return (await _loaded_dashboard(api, user)).build_view()


@patient_router.post("/appointments", response_model=DashboardActionResponse)
async def book_appointment(
    form: BookingForm,
    user: User = Depends(get_current_patient),
    api: ClinicAPIClient = Depends(get_api_client),
):
    dashboard = PatientDashboard(api, user)
    await dashboard.book_appointment(form)
    return _action_response(dashboard)


@patient_router.delete("/appointments/{appointment_id}", response_model=DashboardActionResponse)
async def cancel_appointment(
    appointment_id: str,
    confirm: bool = Query(False, description="The patient confirmed the cancellation"),
    user: User = Depends(get_current_patient),
    api: ClinicAPIClient = Depends(get_api_client),
):
    """Cancelling deletes the appointment outright."""
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cancellation must be confirmed",
        )
    dashboard = PatientDashboard(api, user)
    await dashboard.cancel_appointment(appointment_id, confirmed=True)
    return _action_response(dashboard)


@patient_router.get("/doctors/{doctor_id}", response_model=DoctorInfoDialog)
async def doctor_info(
    doctor_id: str,
    user: User = Depends(get_current_patient),
    api: ClinicAPIClient = Depends(get_api_client),
):
    dashboard = await _loaded_dashboard(api, user)
    dialog = dashboard.doctor_info(doctor_id)
    if dialog is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Doctor not found")
    return dialog
