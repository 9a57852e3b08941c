# /tutorhub/services/homework_service.py

"""
Homework assignment, submission tracking and progress reporting.

Assigning homework creates one `pending` submission row per assigned student
in the same transaction; the progress figures are always derived from those
rows, never stored.
"""

import uuid
from datetime import date
from typing import List, Optional

from ..core.logging_config import get_logger, log_with_context
from ..models import homework_model
from ..models.profile_model import Profile
from .database_service import DatabaseService
from .record_boundary import narrow
from .reporting_helpers import homework_progress

logger = get_logger("reporting")


def list_homework(db: DatabaseService) -> List:
    return db.get_all_homework()


def assign_homework(homework_data: homework_model.HomeworkCreate, assigned_by: Profile, db: DatabaseService):
    """Creates the assignment and a pending submission for every assigned student."""
    unknown = [sid for sid in homework_data.assigned_to if not db.get_student_by_id(sid)]
    if unknown:
        raise ValueError(f"Unknown student IDs: {', '.join(unknown)}")

    homework_id = f"hw_{uuid.uuid4().hex[:12]}"
    homework_record = homework_data.model_dump(exclude={"assigned_to"})
    homework_record['id'] = homework_id
    homework_record['assigned_date'] = homework_data.assigned_date or date.today()
    homework_record['assigned_by'] = assigned_by.id

    # dict.fromkeys keeps the order and drops duplicate student ids.
    submission_records = [
        {
            "id": f"sub_{uuid.uuid4().hex[:12]}",
            "homework_id": homework_id,
            "student_id": student_id,
            "status": homework_model.SubmissionStatus.PENDING.value,
            "parent_acknowledged": False,
        }
        for student_id in dict.fromkeys(homework_data.assigned_to)
    ]
    new_homework = db.add_homework_with_submissions(homework_record, submission_records)
    log_with_context(logger, "INFO", "Homework assigned",
                     context={"homework_id": homework_id},
                     extra_data={"students": len(submission_records)})
    return new_homework


def delete_homework(homework_id: str, db: DatabaseService) -> bool:
    return db.delete_homework(homework_id)


def list_submissions(db: DatabaseService, student_id: Optional[str] = None,
                     homework_id: Optional[str] = None) -> List[homework_model.SubmissionRecord]:
    return narrow(db.get_submissions(student_id=student_id, homework_id=homework_id), homework_model.SubmissionRecord)


def update_submission_status(submission_id: str, update: homework_model.SubmissionStatusUpdate,
                             db: DatabaseService) -> Optional[homework_model.SubmissionRecord]:
    """
    Moves a submission to a new status. Turned-in statuses (completed, late)
    get a submitted date, defaulting to today; pending clears it.
    """
    if update.status == homework_model.SubmissionStatus.PENDING:
        submitted_date = None
    else:
        submitted_date = update.submitted_date or date.today()

    updated = db.update_submission(submission_id, {"status": update.status.value, "submitted_date": submitted_date})
    if updated is None:
        return None
    return homework_model.SubmissionRecord.model_validate(updated)


def acknowledge_submission(submission_id: str, parent: Profile, db: DatabaseService) -> Optional[homework_model.SubmissionRecord]:
    """
    Sets the parent-acknowledgement flag. Only the parent linked to the
    submission's student may do this; anyone else sees None.
    """
    submission = db.get_submission_by_id(submission_id)
    if submission is None:
        return None
    student = db.get_student_by_id(submission.student_id)
    if student is None or student.parent_id != parent.id:
        return None

    updated = db.update_submission(submission_id, {"parent_acknowledged": True})
    return homework_model.SubmissionRecord.model_validate(updated)


def get_student_progress(student_id: str, db: DatabaseService,
                         assigned_since: Optional[date] = None) -> homework_model.HomeworkProgress:
    rows = db.get_submissions(student_id=student_id, assigned_since=assigned_since)
    return homework_progress.summarize(narrow(rows, homework_model.SubmissionRecord), student_id=student_id)


def get_assignment_progress(db: DatabaseService) -> List[homework_model.AssignmentProgress]:
    return homework_progress.summarize_by_assignment(list_submissions(db))


def get_status_counts(db: DatabaseService) -> homework_model.StatusCounts:
    return homework_progress.status_counts(list_submissions(db))
