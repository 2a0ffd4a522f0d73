# tests/conftest.py
import copy

import pytest
from fastapi.testclient import TestClient

from app.clinic_api.api_client import ClinicAPIError
from app.users.user_models.schemas import User

USERS = [
    {
        "id": "p1",
        "email": "jane.doe@example.com",
        "firstName": "Jane",
        "lastName": "Doe",
        "role": "patient",
        "phone": "555-0101",
        "dateOfBirth": "1990-04-12",
        "bloodType": "O+",
        "emergencyContact": "John Doe 555-0199",
    },
    {
        "id": "p2",
        "email": "sam.lee@example.com",
        "firstName": "Sam",
        "lastName": "Lee",
        "role": "patient",
    },
    {
        "id": "d1",
        "email": "g.house@example.com",
        "firstName": "Gregory",
        "lastName": "House",
        "role": "doctor",
        "specialization": "Diagnostics",
        "phone": "555-0200",
    },
    {
        "id": "d2",
        "email": "l.cuddy@example.com",
        "firstName": "Lisa",
        "lastName": "Cuddy",
        "role": "doctor",
        "specialization": "Endocrinology",
    },
    {
        "id": "n1",
        "email": "nurse.joy@example.com",
        "firstName": "Joy",
        "lastName": "Smith",
        "role": "nurse",
    },
]

PASSWORDS = {
    "jane.doe@example.com": "patient123",
    "g.house@example.com": "doctor123",
}

APPOINTMENTS = [
    {"id": "a1", "patientId": "p1", "doctorId": "d1", "date": "2024-05-02",
     "time": "10:00", "reason": "Follow-up", "status": "scheduled"},
    {"id": "a2", "patientId": "p1", "doctorId": "d2", "date": "2024-03-15",
     "time": "14:30", "reason": "Thyroid check", "status": "completed"},
    {"id": "a3", "patientId": "p2", "doctorId": "d1", "date": "2024-05-03",
     "time": "11:00", "reason": "Headache", "status": "scheduled"},
    {"id": "a4", "patientId": "p1", "doctorId": "gone", "date": "2024-06-01",
     "time": "08:00", "reason": "Vaccination", "status": "scheduled"},
]

MEDICAL_RECORDS = [
    {"id": "r1", "patientId": "p1", "doctorId": "d1", "date": "2024-03-15",
     "diagnosis": "Seasonal allergies", "prescription": "Cetirizine 10mg daily",
     "labResults": "IgE elevated", "pdfReport": "https://files.example.com/r1.pdf"},
    {"id": "r2", "patientId": "p2", "doctorId": "d2", "date": "2024-02-01",
     "diagnosis": "Hypothyroidism", "prescription": "Levothyroxine 50mcg"},
]

AVAILABILITY = {
    "d1": {
        "leaveDates": ["2024-05-10", "2024-05-11"],
        "slots": [
            {"dayOfWeek": 1, "startTime": "09:00", "endTime": "12:00"},
            {"dayOfWeek": 3, "startTime": "13:00", "endTime": "17:00"},
        ],
    },
}


class FakeResource:
    """In-memory stand-in for one clinic API collection."""

    def __init__(self, items=None):
        self.items = copy.deepcopy(items or [])
        self.fail_reads = False
        self.fail_writes = False
        self.created = []

    def _check_write(self):
        if self.fail_writes:
            raise ClinicAPIError("POST failed: connection refused")

    def get_all(self):
        if self.fail_reads:
            raise ClinicAPIError("GET failed: connection refused")
        return copy.deepcopy(self.items)

    def create(self, data):
        self._check_write()
        self.created.append(data)
        self.items.append(copy.deepcopy(data))

    def update(self, item_id, updates):
        self._check_write()
        for item in self.items:
            if item["id"] == item_id:
                item.update(updates)
                return
        raise ClinicAPIError(f"PUT /{item_id} returned HTTP 404", status_code=404)

    def delete(self, item_id):
        self._check_write()
        before = len(self.items)
        self.items = [i for i in self.items if i["id"] != item_id]
        if len(self.items) == before:
            raise ClinicAPIError(f"DELETE /{item_id} returned HTTP 404", status_code=404)


class FakeUserResource(FakeResource):
    def __init__(self, items, passwords):
        super().__init__(items)
        self.passwords = dict(passwords)

    def login(self, email, password):
        if self.passwords.get(email) != password:
            raise ClinicAPIError("POST /auth/login returned HTTP 401", status_code=401)
        return next(copy.deepcopy(u) for u in self.items if u["email"] == email)


class FakeAvailabilityResource:
    def __init__(self, mapping):
        self.mapping = copy.deepcopy(mapping)
        self.fail_reads = False
        self.fail_writes = False

    def get_all(self):
        if self.fail_reads:
            raise ClinicAPIError("GET /doctor-availability failed: timed out")
        return copy.deepcopy(self.mapping)

    def update(self, doctor_id, availability):
        if self.fail_writes:
            raise ClinicAPIError("PUT failed: connection refused")
        self.mapping[doctor_id] = copy.deepcopy(availability)


class FakeClinicAPI:
    def __init__(self):
        self.users = FakeUserResource(USERS, PASSWORDS)
        self.appointments = FakeResource(APPOINTMENTS)
        self.medical_records = FakeResource(MEDICAL_RECORDS)
        self.doctor_availability = FakeAvailabilityResource(AVAILABILITY)
        self.closed = False

    def fail_all_reads(self):
        for resource in (self.users, self.appointments, self.medical_records,
                         self.doctor_availability):
            resource.fail_reads = True

    def close(self):
        self.closed = True


@pytest.fixture
def api():
    return FakeClinicAPI()


@pytest.fixture
def patient():
    return User.model_validate(USERS[0])


@pytest.fixture
def doctor():
    return User.model_validate(USERS[2])


@pytest.fixture
def client(api):
    from app.main import app
    from app.users.dependencies import get_api_client

    app.dependency_overrides[get_api_client] = lambda: api
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def patient_client(client):
    response = client.post(
        "/api/auth/login", json={"email": "jane.doe@example.com", "password": "patient123"}
    )
    assert response.status_code == 200
    return client
