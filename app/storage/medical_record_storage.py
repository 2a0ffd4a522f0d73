# app/storage/medical_record_storage.py
from typing import List

from app.clinic_api.api_client import ClinicAPIClient
from app.storage.facade import fetch_list, run_mutation
from app.storage.fetch_result import FetchResult
from app.system_models.medical_record_model.medical_record_schemas import (
    MedicalRecord,
    MedicalRecordUpdate,
)


async def fetch_medical_records(api: ClinicAPIClient) -> FetchResult[List[MedicalRecord]]:
    return await fetch_list("medical records", api.medical_records.get_all, MedicalRecord)


async def get_medical_records(api: ClinicAPIClient) -> List[MedicalRecord]:
    return (await fetch_medical_records(api)).data


async def add_medical_record(api: ClinicAPIClient, record: MedicalRecord) -> None:
    await run_mutation("adding medical record", api.medical_records.create, record.to_api())


async def update_medical_record(
    api: ClinicAPIClient, record_id: str, updates: MedicalRecordUpdate
) -> None:
    await run_mutation(
        "updating medical record", api.medical_records.update, record_id, updates.to_api()
    )


async def delete_medical_record(api: ClinicAPIClient, record_id: str) -> None:
    await run_mutation("deleting medical record", api.medical_records.delete, record_id)
