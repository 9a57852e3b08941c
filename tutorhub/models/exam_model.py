# /tutorhub/models/exam_model.py

from datetime import date
from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TestCreate(BaseModel):
    title: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    test_date: date
    max_marks: int = Field(..., gt=0)


class Test(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    subject: str
    test_date: date
    max_marks: int
    created_by: str


class TestResultRecord(BaseModel):
    """
    A `test_results` row joined with its parent test's maximum marks. This is
    the shape the performance summarizer works on.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    test_id: str
    student_id: str
    marks_obtained: float = Field(..., ge=0)
    # Not validated as positive: a zero here is a malformed row the
    # summarizer has to skip, not a reason to reject the whole snapshot.
    max_marks: float


class ResultCreate(BaseModel):
    student_id: str
    marks_obtained: float = Field(..., ge=0)


class ScoredResult(BaseModel):
    id: Optional[str] = None
    test_id: str
    student_id: str
    marks_obtained: float
    max_marks: float
    percentage: int
    grade: str


class PerformanceSummary(BaseModel):
    count: int = 0
    average: int = 0
    gradeHistogram: Dict[str, int] = Field(default_factory=dict)
    best: Union[int, Literal["N/A"]] = "N/A"
    skipped: int = Field(default=0, description="Results left out because their test has no positive max marks.")
