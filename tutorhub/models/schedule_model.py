# /tutorhub/models/schedule_model.py

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Zero-padded 24-hour clock. Slot ordering relies on this format sorting
# lexicographically in time order.
HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


def _normalize_day(value):
    if isinstance(value, str):
        return value.strip().capitalize()
    return value


class ScheduleEntryCreate(BaseModel):
    subject: str = Field(..., min_length=1)
    class_label: str = Field(..., min_length=1)
    day: Weekday
    start_time: str = Field(..., pattern=HHMM_PATTERN)
    end_time: str = Field(..., pattern=HHMM_PATTERN)

    @field_validator("day", mode="before")
    @classmethod
    def _normalize(cls, v):
        return _normalize_day(v)

    @model_validator(mode="after")
    def _end_after_start(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be later than start_time")
        return self


class ScheduleEntryUpdate(BaseModel):
    subject: Optional[str] = Field(default=None, min_length=1)
    class_label: Optional[str] = Field(default=None, min_length=1)
    day: Optional[Weekday] = None
    start_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN)

    @field_validator("day", mode="before")
    @classmethod
    def _normalize(cls, v):
        return _normalize_day(v)


class ScheduleEntry(ScheduleEntryCreate):
    """A narrowed `class_schedules` row."""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    created_by: Optional[str] = None

    @property
    def slot_label(self) -> str:
        return f"{self.start_time} - {self.end_time}"


class ScheduleMatrix(BaseModel):
    days: List[Weekday]
    slots: List[str]
    grid: Dict[str, Dict[str, Optional[ScheduleEntry]]]
