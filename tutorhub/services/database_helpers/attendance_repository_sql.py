# /tutorhub/services/database_helpers/attendance_repository_sql.py

from datetime import date
from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from tutorhub.db.models.attendance_models import AttendanceRecord
from tutorhub.db.models.profile_student_models import Student


class AttendanceRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_attendance(
        self,
        student_id: Optional[str] = None,
        class_label: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[AttendanceRecord]:
        """
        Attendance rows filtered by any combination of student, class and an
        inclusive date range, oldest first.
        """
        query = self.db.query(AttendanceRecord)
        if student_id:
            query = query.filter(AttendanceRecord.student_id == student_id)
        if class_label:
            query = query.join(Student, AttendanceRecord.student_id == Student.id).filter(Student.class_label == class_label)
        if start:
            query = query.filter(AttendanceRecord.class_date >= start)
        if end:
            query = query.filter(AttendanceRecord.class_date <= end)
        return query.order_by(AttendanceRecord.class_date).all()

    def _find(self, student_id: str, class_date: date) -> Optional[AttendanceRecord]:
        return (
            self.db.query(AttendanceRecord)
            .filter(AttendanceRecord.student_id == student_id, AttendanceRecord.class_date == class_date)
            .first()
        )

    def _apply(self, record: Dict) -> AttendanceRecord:
        existing = self._find(record['student_id'], record['class_date'])
        if existing:
            existing.status = record['status']
            existing.notes = record.get('notes')
            existing.marked_by = record['marked_by']
            return existing
        new_record = AttendanceRecord(**record)
        self.db.add(new_record)
        return new_record

    def upsert_attendance(self, record: Dict) -> AttendanceRecord:
        """
        Inserts or replaces the mark for (student_id, class_date). The record
        dictionary must carry an `id`, used only when a new row is created.
        """
        saved = self._apply(record)
        self.db.commit()
        self.db.refresh(saved)
        return saved

    def upsert_attendance_bulk(self, records: List[Dict]) -> int:
        """Applies many marks in a single transaction. Returns how many rows were written."""
        for record in records:
            self._apply(record)
            # Flush so a repeated (student, date) in the same batch finds the pending row.
            self.db.flush()
        self.db.commit()
        return len(records)
