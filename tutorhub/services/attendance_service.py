# /tutorhub/services/attendance_service.py

"""
Attendance marking and reporting.

Marking is an upsert on (student, date): a second mark for the same day
replaces the first. Reporting narrows the fetched rows and hands them to the
attendance aggregator.
"""

import uuid
from datetime import date
from typing import List, Optional

import pandas as pd

from ..core.logging_config import get_logger, log_with_context
from ..models import attendance_model
from ..models.profile_model import Profile
from .database_service import DatabaseService
from .record_boundary import narrow
from .reporting_helpers import attendance_aggregator

logger = get_logger("reporting")

EXPORT_COLUMNS = ['Date', 'Student Name', 'Class', 'Status', 'Notes']


def mark_attendance(mark: attendance_model.AttendanceMark, marked_by: Profile, db: DatabaseService):
    """Records one student's status for a day, replacing any earlier mark."""
    if not db.get_student_by_id(mark.student_id):
        raise ValueError(f"Student with ID {mark.student_id} not found")

    record = {
        "id": f"att_{uuid.uuid4().hex[:12]}",
        "student_id": mark.student_id,
        "class_date": mark.class_date,
        "status": mark.status.value,
        "notes": mark.notes or None,
        "marked_by": marked_by.id,
    }
    saved = db.upsert_attendance(record)
    log_with_context(logger, "INFO", "Attendance marked",
                     context={"student_id": mark.student_id, "class_date": str(mark.class_date)},
                     extra_data={"status": mark.status.value, "marked_by": marked_by.id})
    return attendance_model.AttendanceRecord.model_validate(saved)


def mark_bulk_attendance(mark: attendance_model.BulkAttendanceMark, marked_by: Profile,
                         db: DatabaseService) -> attendance_model.BulkMarkResponse:
    """Applies one status to every student in a class (or the whole roster) for one day."""
    students = db.get_all_students(class_label=mark.class_label)
    records = [
        {
            "id": f"att_{uuid.uuid4().hex[:12]}",
            "student_id": s.id,
            "class_date": mark.class_date,
            "status": mark.status.value,
            "marked_by": marked_by.id,
        }
        for s in students
    ]
    marked = db.upsert_attendance_bulk(records) if records else 0
    log_with_context(logger, "INFO", "Bulk attendance marked",
                     context={"class_label": mark.class_label, "class_date": str(mark.class_date)},
                     extra_data={"status": mark.status.value, "marked": marked})
    return attendance_model.BulkMarkResponse(marked=marked, class_date=mark.class_date, status=mark.status)


def get_daily_register(on: date, db: DatabaseService, class_label: Optional[str] = None) -> List[attendance_model.RegisterEntry]:
    students = db.get_all_students(class_label=class_label)
    records = narrow(db.get_attendance(class_label=class_label, start=on, end=on), attendance_model.AttendanceRecord)
    return attendance_aggregator.daily_register(students, records, on)


def get_student_summary(student_id: str, db: DatabaseService, start: Optional[date] = None,
                        end: Optional[date] = None) -> attendance_model.AttendanceSummary:
    rows = db.get_attendance(student_id=student_id, start=start, end=end)
    return attendance_aggregator.summarize(narrow(rows, attendance_model.AttendanceRecord))


def get_student_history(student_id: str, db: DatabaseService, start: Optional[date] = None,
                        end: Optional[date] = None) -> List[attendance_model.AttendanceRecord]:
    """The student's own day-by-day records, newest first."""
    records = narrow(db.get_attendance(student_id=student_id, start=start, end=end), attendance_model.AttendanceRecord)
    return sorted(records, key=lambda r: r.class_date, reverse=True)


def get_class_summary(db: DatabaseService, class_label: Optional[str] = None, start: Optional[date] = None,
                      end: Optional[date] = None) -> List[attendance_model.StudentAttendanceSummary]:
    rows = db.get_attendance(class_label=class_label, start=start, end=end)
    return attendance_aggregator.summarize_by_student(narrow(rows, attendance_model.AttendanceRecord))


def export_attendance_as_csv(db: DatabaseService, class_label: Optional[str] = None, start: Optional[date] = None,
                             end: Optional[date] = None) -> str:
    """Attendance register over a date range as CSV, one row per mark."""
    names = {s.id: (s.name, s.class_label) for s in db.get_all_students(class_label=class_label)}
    records = narrow(db.get_attendance(class_label=class_label, start=start, end=end), attendance_model.AttendanceRecord)

    export_data = [
        {
            'Date': r.class_date.isoformat(),
            'Student Name': names.get(r.student_id, ("Unknown Student", ""))[0],
            'Class': names.get(r.student_id, ("", "N/A"))[1],
            'Status': r.status.value,
            'Notes': r.notes or "",
        }
        for r in records
    ]
    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)
