# /tutorhub/models/syllabus_model.py

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import normalize_status


class SyllabusStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


SYLLABUS_STATUS_ALIASES = {"in progress": "in-progress", "in_progress": "in-progress"}


class TopicCreate(BaseModel):
    class_label: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    topic: str = Field(..., min_length=1)
    description: Optional[str] = None
    status: SyllabusStatus = SyllabusStatus.PENDING

    @field_validator("status", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_status(v, SYLLABUS_STATUS_ALIASES)


class TopicStatusUpdate(BaseModel):
    status: SyllabusStatus

    @field_validator("status", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_status(v, SYLLABUS_STATUS_ALIASES)


class Topic(TopicCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    completion_date: Optional[date] = None
    created_by: Optional[str] = None


class SyllabusProgress(BaseModel):
    class_label: str
    subject: str
    total: int = 0
    completed: int = 0
    inProgress: int = 0
    pending: int = 0
    percentage: int = 0
