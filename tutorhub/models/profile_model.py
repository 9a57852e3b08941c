# /tutorhub/models/profile_model.py

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import normalize_status


class UserType(str, Enum):
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"


class ProfileCreate(BaseModel):
    name: str = Field(..., min_length=2)
    email: str = Field(..., min_length=3)
    phone: Optional[str] = None
    user_type: UserType

    @field_validator("user_type", mode="before")
    @classmethod
    def _normalize_user_type(cls, v):
        return normalize_status(v)


class Profile(ProfileCreate):
    """The acting identity as seen by services and routers."""
    model_config = ConfigDict(from_attributes=True)

    id: str
