# /tests/test_homework_progress.py

import pytest

from tutorhub.models.homework_model import SubmissionRecord, SubmissionStatus
from tutorhub.services.reporting_helpers import homework_progress


def _submission(homework_id, student_id, status, acknowledged=False):
    return SubmissionRecord(homework_id=homework_id, student_id=student_id, status=status,
                            parent_acknowledged=acknowledged)


@pytest.fixture
def mixed_submissions():
    return [
        _submission("hw_1", "stu_1", "completed", acknowledged=True),
        _submission("hw_2", "stu_1", "late"),
        _submission("hw_3", "stu_1", "pending"),
        _submission("hw_1", "stu_2", "completed"),
    ]


def test_late_submission_is_not_counted_as_submitted(mixed_submissions):
    progress = homework_progress.summarize(mixed_submissions, student_id="stu_1")
    assert progress.total == 3
    assert progress.submitted == 1
    assert progress.pending == 2
    assert progress.late == 1
    assert progress.acknowledged == 1


def test_without_student_filter_counts_everyone(mixed_submissions):
    progress = homework_progress.summarize(mixed_submissions)
    assert progress.total == 4
    assert progress.submitted == 2


def test_empty_and_none_snapshots():
    assert homework_progress.summarize([]).model_dump() == {
        "total": 0, "submitted": 0, "pending": 0, "acknowledged": 0, "late": 0,
    }
    assert homework_progress.summarize(None).total == 0


def test_legacy_submitted_status_reads_as_completed():
    record = SubmissionRecord.model_validate({
        "homework_id": "hw_1", "student_id": "stu_1", "status": "Submitted", "parent_acknowledged": None,
    })
    assert record.status == SubmissionStatus.COMPLETED
    assert record.parent_acknowledged is False
    assert homework_progress.summarize([record]).submitted == 1


def test_summarize_by_assignment_keeps_first_seen_order(mixed_submissions):
    per_assignment = homework_progress.summarize_by_assignment(mixed_submissions)
    assert [p.homework_id for p in per_assignment] == ["hw_1", "hw_2", "hw_3"]
    assert per_assignment[0].total == 2
    assert per_assignment[0].submitted == 2


def test_status_counts(mixed_submissions):
    counts = homework_progress.status_counts(mixed_submissions)
    assert (counts.pending, counts.completed, counts.late) == (1, 2, 1)
