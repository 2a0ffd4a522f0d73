# app/storage/availability_storage.py
from app.clinic_api.api_client import ClinicAPIClient
from app.storage.facade import fetch_mapping, run_mutation
from app.storage.fetch_result import FetchResult
from app.system_models.availability_model.availability_schemas import (
    AvailabilityMap,
    DoctorAvailability,
)


async def fetch_doctor_availability(api: ClinicAPIClient) -> FetchResult[AvailabilityMap]:
    return await fetch_mapping(
        "doctor availability", api.doctor_availability.get_all, DoctorAvailability
    )


async def get_doctor_availability(api: ClinicAPIClient) -> AvailabilityMap:
    """Availability keyed by doctor id; empty mapping when the API is unreachable."""
    return (await fetch_doctor_availability(api)).data


async def update_doctor_availability(
    api: ClinicAPIClient, doctor_id: str, availability: DoctorAvailability
) -> None:
    await run_mutation(
        "updating doctor availability",
        api.doctor_availability.update,
        doctor_id,
        availability.model_dump(by_alias=True),
    )
