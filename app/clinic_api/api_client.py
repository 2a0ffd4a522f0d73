# app/clinic_api/api_client.py
"""
Clinic API Client
Thin synchronous wrapper around the external clinic REST API.
Each entity is exposed as a resource with CRUD verbs; every failure surfaces as ClinicAPIError.
"""
import logging
import threading
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


class ClinicAPIError(Exception):
    """Raised for transport failures, timeouts, non-2xx replies and undecodable bodies."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class Resource:
    """CRUD verbs for one collection, e.g. /appointments."""

    def __init__(self, client: "ClinicAPIClient", path: str):
        self.client = client
        self.path = path

    def _item_path(self, item_id: str) -> str:
        return f"{self.path}/{quote(str(item_id), safe='')}"

    def get_all(self) -> List[Dict[str, Any]]:
        return self.client.request("GET", self.path) or []

    def create(self, data: Dict[str, Any]) -> None:
        self.client.request("POST", self.path, data)

    def update(self, item_id: str, updates: Dict[str, Any]) -> None:
        self.client.request("PUT", self._item_path(item_id), updates)

    def delete(self, item_id: str) -> None:
        self.client.request("DELETE", self._item_path(item_id))


class UserResource(Resource):
    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self.client.request("POST", "/auth/login", {"email": email, "password": password})


class DoctorAvailabilityResource(Resource):
    """Availability is keyed by doctor id rather than listed."""

    def get_all(self) -> Dict[str, Dict[str, Any]]:
        return self.client.request("GET", self.path) or {}

    def update(self, doctor_id: str, availability: Dict[str, Any]) -> None:
        self.client.request("PUT", self._item_path(doctor_id), availability)


class ClinicAPIClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._shared_session = session
        self._local = threading.local()
        self._thread_sessions: List[requests.Session] = []
        self._sessions_lock = threading.Lock()

        self.users = UserResource(self, "/users")
        self.appointments = Resource(self, "/appointments")
        self.medical_records = Resource(self, "/medical-records")
        self.doctor_availability = DoctorAvailabilityResource(self, "/doctor-availability")

    @property
    def session(self) -> requests.Session:
        """
        HTTP session for the calling thread.

        Facade calls run concurrently in worker threads and requests.Session
        is not thread-safe, so each thread gets its own. An injected session
        is used as-is from every thread.
        """
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._sessions_lock:
                self._thread_sessions.append(session)
        return session

    def request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise ClinicAPIError(f"{method} {path} failed: {e}") from e

        if not response.ok:
            raise ClinicAPIError(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ClinicAPIError(
                f"{method} {path} returned a non-JSON body", status_code=response.status_code
            ) from e

    def close(self) -> None:
        with self._sessions_lock:
            sessions, self._thread_sessions = self._thread_sessions, []
        self._local = threading.local()
        for session in sessions:
            session.close()
        if self._shared_session is not None:
            self._shared_session.close()
