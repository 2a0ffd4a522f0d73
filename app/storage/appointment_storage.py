# app/storage/appointment_storage.py
from typing import List

from app.clinic_api.api_client import ClinicAPIClient
from app.storage.facade import fetch_list, run_mutation
from app.storage.fetch_result import FetchResult
from app.system_models.appointment_model.appointment_schemas import Appointment, AppointmentUpdate


async def fetch_appointments(api: ClinicAPIClient) -> FetchResult[List[Appointment]]:
    return await fetch_list("appointments", api.appointments.get_all, Appointment)


async def get_appointments(api: ClinicAPIClient) -> List[Appointment]:
    return (await fetch_appointments(api)).data


async def add_appointment(api: ClinicAPIClient, appointment: Appointment) -> None:
    await run_mutation("adding appointment", api.appointments.create, appointment.to_api())


async def update_appointment(
    api: ClinicAPIClient, appointment_id: str, updates: AppointmentUpdate
) -> None:
    await run_mutation(
        "updating appointment", api.appointments.update, appointment_id, updates.to_api()
    )


async def delete_appointment(api: ClinicAPIClient, appointment_id: str) -> None:
    await run_mutation("deleting appointment", api.appointments.delete, appointment_id)
