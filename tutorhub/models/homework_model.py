# /tutorhub/models/homework_model.py

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .common import normalize_status


class SubmissionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    LATE = "late"


# Older dashboard code wrote "submitted" for a turned-in assignment.
SUBMISSION_STATUS_ALIASES = {"submitted": SubmissionStatus.COMPLETED.value}


class HomeworkCreate(BaseModel):
    title: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    description: Optional[str] = None
    assigned_date: Optional[date] = Field(default=None, description="Defaults to today.")
    due_date: date
    assigned_to: List[str] = Field(default_factory=list, description="Student IDs that receive a pending submission.")

    @model_validator(mode="after")
    def _due_after_assigned(self):
        if self.assigned_date and self.due_date < self.assigned_date:
            raise ValueError("due_date cannot be before assigned_date")
        return self


class Homework(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    subject: str
    description: Optional[str] = None
    assigned_date: date
    due_date: date
    assigned_by: str


class SubmissionRecord(BaseModel):
    """A narrowed `homework_submissions` row."""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    homework_id: str
    student_id: str
    status: SubmissionStatus
    submitted_date: Optional[date] = None
    parent_acknowledged: bool = False

    @field_validator("status", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_status(v, SUBMISSION_STATUS_ALIASES)

    @field_validator("parent_acknowledged", mode="before")
    @classmethod
    def _none_is_false(cls, v):
        return bool(v) if v is not None else False


class SubmissionStatusUpdate(BaseModel):
    status: SubmissionStatus
    submitted_date: Optional[date] = Field(default=None, description="Defaults to today for completed/late.")

    @field_validator("status", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_status(v, SUBMISSION_STATUS_ALIASES)


class HomeworkProgress(BaseModel):
    total: int = 0
    submitted: int = 0
    pending: int = 0
    acknowledged: int = 0
    late: int = 0


class AssignmentProgress(HomeworkProgress):
    homework_id: str


class StatusCounts(BaseModel):
    pending: int = 0
    completed: int = 0
    late: int = 0
