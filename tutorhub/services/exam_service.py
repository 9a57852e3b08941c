# /tutorhub/services/exam_service.py

"""
Tests, recorded results and performance summaries.
"""

import uuid
from typing import List, Optional

from ..core.logging_config import get_logger, log_with_context
from ..models import exam_model
from ..models.profile_model import Profile
from .database_service import DatabaseService
from .record_boundary import narrow
from .reporting_helpers import performance_summary

logger = get_logger("reporting")


def list_tests(db: DatabaseService) -> List:
    return db.get_all_tests()


def create_test(test_data: exam_model.TestCreate, created_by: Profile, db: DatabaseService):
    record = test_data.model_dump()
    record['id'] = f"tst_{uuid.uuid4().hex[:12]}"
    record['created_by'] = created_by.id
    return db.add_test(record)


def delete_test(test_id: str, db: DatabaseService) -> bool:
    return db.delete_test(test_id)


def record_result(test_id: str, result: exam_model.ResultCreate, db: DatabaseService) -> exam_model.ScoredResult:
    """Stores (or replaces) a student's marks and returns them scored."""
    test = db.get_test_by_id(test_id)
    if test is None:
        raise LookupError(f"Test with ID {test_id} not found")
    if not db.get_student_by_id(result.student_id):
        raise ValueError(f"Student with ID {result.student_id} not found")
    if result.marks_obtained > test.max_marks:
        raise ValueError(f"marks_obtained ({result.marks_obtained}) exceeds the test's max marks ({test.max_marks}).")

    saved = db.upsert_result({
        "id": f"res_{uuid.uuid4().hex[:12]}",
        "test_id": test_id,
        "student_id": result.student_id,
        "marks_obtained": result.marks_obtained,
    })
    log_with_context(logger, "INFO", "Test result recorded",
                     context={"test_id": test_id, "student_id": result.student_id})
    record = exam_model.TestResultRecord(
        id=saved.id, test_id=test_id, student_id=saved.student_id,
        marks_obtained=saved.marks_obtained, max_marks=test.max_marks,
    )
    return performance_summary.score_result(record)


def _results(db: DatabaseService, test_id: Optional[str] = None, student_id: Optional[str] = None,
             limit: Optional[int] = None) -> List[exam_model.TestResultRecord]:
    rows = db.get_results_with_max_marks(test_id=test_id, student_id=student_id, limit=limit)
    return narrow(rows, exam_model.TestResultRecord)


def get_scored_results(db: DatabaseService, test_id: Optional[str] = None,
                       student_id: Optional[str] = None, scale_name: Optional[str] = None) -> List[exam_model.ScoredResult]:
    scored, _ = performance_summary.score_results(
        _results(db, test_id=test_id, student_id=student_id),
        performance_summary.get_grade_scale(scale_name),
    )
    return scored


def get_performance_summary(db: DatabaseService, test_id: Optional[str] = None, student_id: Optional[str] = None,
                            limit: Optional[int] = None, scale_name: Optional[str] = None) -> exam_model.PerformanceSummary:
    return performance_summary.summarize(
        _results(db, test_id=test_id, student_id=student_id, limit=limit),
        performance_summary.get_grade_scale(scale_name),
    )
