# /tutorhub/models/attendance_model.py

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import normalize_status


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


# --- Boundary Record ---

class AttendanceRecord(BaseModel):
    """A narrowed `attendance` row, as consumed by the aggregator."""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    student_id: str
    class_date: date
    status: AttendanceStatus
    notes: Optional[str] = None
    marked_by: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_status(v)


# --- Request Models ---

class AttendanceMark(BaseModel):
    student_id: str
    class_date: date
    status: AttendanceStatus
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator("status", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_status(v)


class BulkAttendanceMark(BaseModel):
    """Marks every student of a class (or the whole roster) with one status."""
    class_date: date
    status: AttendanceStatus
    class_label: Optional[str] = Field(default=None, description="Limit to one class; omit for every student.")

    @field_validator("status", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_status(v)


# --- Response Models ---

class AttendanceSummary(BaseModel):
    total: int = 0
    present: int = 0
    late: int = 0
    absent: int = 0
    percentage: int = Field(default=0, ge=0, le=100)


class StudentAttendanceSummary(AttendanceSummary):
    student_id: str


class RegisterEntry(BaseModel):
    """One row of the daily register: a roster student and their status for the day."""
    student_id: str
    name: str
    class_label: str
    status: str = Field(..., description="An AttendanceStatus value, or 'unmarked'.")
    notes: Optional[str] = None


class BulkMarkResponse(BaseModel):
    marked: int
    class_date: date
    status: AttendanceStatus
