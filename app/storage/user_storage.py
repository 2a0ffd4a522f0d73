# app/storage/user_storage.py
from typing import List

from app.clinic_api.api_client import ClinicAPIClient
from app.storage.facade import fetch_list, run_mutation
from app.storage.fetch_result import FetchResult
from app.users.user_models.schemas import User, UserUpdate


async def fetch_users(api: ClinicAPIClient) -> FetchResult[List[User]]:
    return await fetch_list("users", api.users.get_all, User)


async def get_users(api: ClinicAPIClient) -> List[User]:
    """All users; empty list when the API is unreachable."""
    return (await fetch_users(api)).data


async def add_user(api: ClinicAPIClient, user: User) -> None:
    await run_mutation("adding user", api.users.create, user.to_api())


async def update_user(api: ClinicAPIClient, user_id: str, updates: UserUpdate) -> None:
    await run_mutation("updating user", api.users.update, user_id, updates.to_api())


async def delete_user(api: ClinicAPIClient, user_id: str) -> None:
    await run_mutation("deleting user", api.users.delete, user_id)


async def login_user(api: ClinicAPIClient, email: str, password: str) -> User:
    raw = await run_mutation("during login", api.users.login, email, password)
    return User.model_validate(raw)
