# app/session/session_registry.py
import threading
import uuid
from typing import Dict, Optional, Tuple

from app.session.session_storage import MemoryStorage


class SessionRegistry:
    """
    One MemoryStorage per logged-in browser, looked up by the session cookie.

    Entries are only created on login; lookups for unknown or missing
    cookies never add one.
    """

    def __init__(self):
        self._sessions: Dict[str, MemoryStorage] = {}
        self._lock = threading.Lock()

    def get(self, session_id: Optional[str]) -> Optional[MemoryStorage]:
        if not session_id:
            return None
        with self._lock:
            return self._sessions.get(session_id)

    def create(self) -> Tuple[str, MemoryStorage]:
        session_id = uuid.uuid4().hex
        storage = MemoryStorage()
        with self._lock:
            self._sessions[session_id] = storage
        return session_id, storage

    def discard(self, session_id: Optional[str]) -> None:
        if not session_id:
            return
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
