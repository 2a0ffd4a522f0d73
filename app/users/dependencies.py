# app/users/dependencies.py
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status

from app.clinic_api.api_client import ClinicAPIClient
from app.session.session_context import SessionContext
from app.session.session_registry import SessionRegistry
from app.session.session_storage import MemoryStorage
from app.users.user_models.schemas import User
from config.appconfig import settings

session_registry = SessionRegistry()


# ===========================================
# ✅ Clinic API client (one per process)
# ===========================================
@lru_cache
def get_api_client() -> ClinicAPIClient:
    return ClinicAPIClient(settings.API_BASE_URL, timeout=settings.API_TIMEOUT_SECONDS)


# ===========================================
# ✅ Browser session (cookie -> storage)
# ===========================================
def get_session(request: Request) -> SessionContext:
    # Unknown or missing cookie: an unregistered, empty session (logged out)
    storage = session_registry.get(request.cookies.get(settings.SESSION_COOKIE_NAME))
    return SessionContext(storage if storage is not None else MemoryStorage())


# ===========================================
# ✅ Get Current User From Session
# ===========================================
def get_current_user(session: SessionContext = Depends(get_session)) -> User:
    user = session.get_current_user()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return user


def get_current_patient(user: User = Depends(get_current_user)) -> User:
    if user.role != "patient":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Patient dashboard is not available for role '{user.role}'",
        )
    return user
