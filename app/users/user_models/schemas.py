# app/users/user_models/schemas.py

from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, field_validator

from app.system_models.base_schema import CamelModel

# Allowed values as constants
ROLES = Literal["admin", "doctor", "nurse", "patient"]


# ✅ User record as returned by the clinic API
class User(CamelModel):
    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    role: ROLES

    # Role-specific, all optional
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    specialization: Optional[str] = None
    blood_type: Optional[str] = None
    emergency_contact: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @field_validator("first_name", "last_name", mode="before")
    def none_as_empty(cls, v):
        return "" if v is None else v


# ✅ Partial update; role is not editable from this layer
class UserUpdate(CamelModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    specialization: Optional[str] = None
    blood_type: Optional[str] = None
    emergency_contact: Optional[str] = None


# ✅ User login request
class UserLogin(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


# ✅ Response schema for user logout
class UserLogoutResponse(BaseModel):
    message: str
