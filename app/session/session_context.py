# app/session/session_context.py
import logging
from typing import Optional

from pydantic import ValidationError

from app.session.session_storage import SessionStorage
from app.users.user_models.schemas import User
from config.appconfig import settings

logger = logging.getLogger(__name__)


class SessionContext:
    """
    The logged-in user, cached as a single JSON blob under one storage key.

    Absence of the key means logged out. The cached user is never
    revalidated against the clinic API.
    """

    def __init__(self, storage: SessionStorage, key: Optional[str] = None):
        self.storage = storage
        self.key = key or settings.SESSION_STORAGE_KEY

    def get_current_user(self) -> Optional[User]:
        raw = self.storage.get_item(self.key)
        if not raw:
            return None
        try:
            return User.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"⚠️  Discarding corrupt session user: {e}")
            self.storage.remove_item(self.key)
            return None

    def set_current_user(self, user: Optional[User]) -> None:
        if user is not None:
            self.storage.set_item(self.key, user.model_dump_json(by_alias=True))
        else:
            self.storage.remove_item(self.key)

    @property
    def is_authenticated(self) -> bool:
        return self.get_current_user() is not None
