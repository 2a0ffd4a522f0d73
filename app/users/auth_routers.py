# app/users/auth_routers.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.clinic_api.api_client import ClinicAPIClient
from app.session.session_context import SessionContext
from app.storage.user_storage import login_user
from app.users.dependencies import get_api_client, get_current_user, get_session, session_registry
from app.users.user_models.schemas import User, UserLogin, UserLogoutResponse
from config.appconfig import settings

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================
# ✅ LOGIN
# ============================================================
@router.post("/login", response_model=User)
async def login(
    user_data: UserLogin,
    request: Request,
    response: Response,
    api: ClinicAPIClient = Depends(get_api_client),
) -> User:
    try:
        user = await login_user(api, user_data.email, user_data.password)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    # Fresh session id on every login; any previous one is dropped
    session_registry.discard(request.cookies.get(settings.SESSION_COOKIE_NAME))
    session_id, storage = session_registry.create()
    SessionContext(storage).set_current_user(user)
    response.set_cookie(settings.SESSION_COOKIE_NAME, session_id, httponly=True, samesite="lax")
    logger.info(f"User {user.id} logged in as {user.role}")
    return user


# ============================================================
# ✅ LOGOUT
# ============================================================
@router.post("/logout", response_model=UserLogoutResponse)
async def logout(
    request: Request,
    response: Response,
    session: SessionContext = Depends(get_session),
) -> UserLogoutResponse:
    session.set_current_user(None)
    session_registry.discard(request.cookies.get(settings.SESSION_COOKIE_NAME))
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return UserLogoutResponse(message="Logged out")


# ============================================================
# ✅ CURRENT USER
# ============================================================
@router.get("/me", response_model=User)
async def me(user: User = Depends(get_current_user)) -> User:
    return user
