# /tests/test_attendance_aggregator.py

from datetime import date
from types import SimpleNamespace

import pytest

from tutorhub.models.attendance_model import AttendanceRecord
from tutorhub.services.reporting_helpers import attendance_aggregator


def _record(student_id, day, status):
    return AttendanceRecord(student_id=student_id, class_date=date(2026, 10, day), status=status)


def test_empty_snapshot_is_all_zero():
    summary = attendance_aggregator.summarize([])
    assert summary.model_dump() == {"total": 0, "present": 0, "late": 0, "absent": 0, "percentage": 0}


def test_none_is_treated_as_empty():
    assert attendance_aggregator.summarize(None).total == 0


def test_late_counts_as_attended():
    records = [
        _record("stu_1", 1, "present"),
        _record("stu_1", 2, "late"),
        _record("stu_1", 3, "absent"),
        _record("stu_1", 4, "absent"),
    ]
    summary = attendance_aggregator.summarize(records)
    assert (summary.present, summary.late, summary.absent, summary.total) == (1, 1, 2, 4)
    assert summary.percentage == 50


@pytest.mark.parametrize("statuses, expected", [
    (["present"] * 5 + ["absent"] * 3, 63),  # 62.5 rounds half-up
    (["present", "absent", "absent"], 33),
    (["late"] * 3, 100),
    (["absent"] * 2, 0),
])
def test_percentage_rounding_and_bounds(statuses, expected):
    records = [_record("stu_1", i + 1, s) for i, s in enumerate(statuses)]
    summary = attendance_aggregator.summarize(records)
    assert summary.percentage == expected
    assert summary.present + summary.late + summary.absent == summary.total
    assert 0 <= summary.percentage <= 100


def test_mixed_case_statuses_are_normalized_at_the_boundary():
    record = AttendanceRecord.model_validate({"student_id": "stu_1", "class_date": "2026-10-01", "status": "Present"})
    assert attendance_aggregator.summarize([record]).present == 1


def test_summarize_by_student_groups_and_sorts():
    records = [
        _record("stu_b", 1, "absent"),
        _record("stu_a", 1, "present"),
        _record("stu_b", 2, "present"),
    ]
    per_student = attendance_aggregator.summarize_by_student(records)
    assert [s.student_id for s in per_student] == ["stu_a", "stu_b"]
    assert per_student[0].percentage == 100
    assert per_student[1].percentage == 50


def test_daily_register_marks_missing_students_as_unmarked():
    students = [
        SimpleNamespace(id="stu_1", name="Meera", class_label="10th"),
        SimpleNamespace(id="stu_2", name="Kabir", class_label="10th"),
    ]
    on = date(2026, 10, 5)
    records = [
        AttendanceRecord(student_id="stu_1", class_date=on, status="late", notes="Bus delay"),
        AttendanceRecord(student_id="stu_2", class_date=date(2026, 10, 4), status="present"),
    ]
    register = attendance_aggregator.daily_register(students, records, on)

    assert register[0].status == "late"
    assert register[0].notes == "Bus delay"
    assert register[1].status == attendance_aggregator.UNMARKED
