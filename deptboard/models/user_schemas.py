from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, EmailStr, field_validator

from deptboard.models.marks_schemas import CamelModel


class RoleEnum(str, Enum):
    HOD = "HOD"
    PRINCIPAL = "PRINCIPAL"
    FACULTY = "FACULTY"
    STUDENT = "STUDENT"


class FacultyCreate(CamelModel):
    username: str
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    # Falls back to the configured default password when omitted
    password: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None


class FacultyResponse(CamelModel):
    id: str
    username: str
    full_name: str
    department: str
    designation: str
    subjects: List[str] = []


class FacultyCreated(BaseModel):
    message: str
    id: str


class UserResponse(CamelModel):
    username: str = ""
    full_name: Optional[str] = None
    role: Optional[RoleEnum] = None
    department: Optional[str] = None

    @field_validator("role", mode="before")
    @classmethod
    def _known_role(cls, v):
        try:
            return RoleEnum(v)
        except (TypeError, ValueError):
            return None

    @classmethod
    def from_user(cls, user: dict) -> "UserResponse":
        return cls(
            username=str(user.get("username") or ""),
            full_name=user.get("full_name"),
            role=user.get("role"),
            department=user.get("department"),
        )


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    username: Optional[str] = None
    role: Optional[str] = None
