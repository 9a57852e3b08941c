# /tutorhub/services/database_service.py

from datetime import date
from typing import Dict, Generator, List, Optional
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from tutorhub.db.database import get_db

# --- Repository Imports ---
from .database_helpers.profile_student_repository_sql import ProfileStudentRepositorySQL
from .database_helpers.attendance_repository_sql import AttendanceRepositorySQL
from .database_helpers.fee_repository_sql import FeeRepositorySQL
from .database_helpers.homework_repository_sql import HomeworkRepositorySQL
from .database_helpers.exam_repository_sql import ExamRepositorySQL
from .database_helpers.schedule_repository_sql import ScheduleRepositorySQL


class DatabaseService:
    """
    Facade over the per-area SQL repositories. Services depend on this class
    only, which keeps them easy to exercise with a MagicMock in tests.
    """

    def __init__(self, db_session: Session):
        if db_session is None:
            raise ValueError("A database session is required.")
        self.session = db_session
        self.roster_repo = ProfileStudentRepositorySQL(db_session)
        self.attendance_repo = AttendanceRepositorySQL(db_session)
        self.fee_repo = FeeRepositorySQL(db_session)
        self.homework_repo = HomeworkRepositorySQL(db_session)
        self.exam_repo = ExamRepositorySQL(db_session)
        self.schedule_repo = ScheduleRepositorySQL(db_session)

    # --- PROFILE & STUDENT METHODS (DELEGATED) ---
    def get_profile_by_id(self, profile_id: str): return self.roster_repo.get_profile_by_id(profile_id)
    def add_profile(self, record: Dict): return self.roster_repo.add_profile(record)
    def get_all_students(self, class_label: Optional[str] = None) -> List: return self.roster_repo.get_all_students(class_label=class_label)
    def get_student_by_id(self, student_id: str): return self.roster_repo.get_student_by_id(student_id)
    def get_student_by_profile_id(self, profile_id: str): return self.roster_repo.get_student_by_profile_id(profile_id)
    def get_students_by_parent_id(self, parent_id: str) -> List: return self.roster_repo.get_students_by_parent_id(parent_id)
    def add_student(self, record: Dict): return self.roster_repo.add_student(record)
    def update_student(self, student_id: str, data: Dict): return self.roster_repo.update_student(student_id, data)
    def delete_student(self, student_id: str) -> bool: return self.roster_repo.delete_student(student_id)

    # --- ATTENDANCE METHODS (DELEGATED) ---
    def get_attendance(self, student_id: Optional[str] = None, class_label: Optional[str] = None,
                       start: Optional[date] = None, end: Optional[date] = None) -> List:
        return self.attendance_repo.get_attendance(student_id=student_id, class_label=class_label, start=start, end=end)
    def upsert_attendance(self, record: Dict): return self.attendance_repo.upsert_attendance(record)
    def upsert_attendance_bulk(self, records: List[Dict]) -> int: return self.attendance_repo.upsert_attendance_bulk(records)

    # --- FEE METHODS (DELEGATED) ---
    def get_fees(self, month: Optional[str] = None, student_id: Optional[str] = None) -> List: return self.fee_repo.get_fees(month=month, student_id=student_id)
    def get_fee_by_id(self, fee_id: str): return self.fee_repo.get_fee_by_id(fee_id)
    def get_fee_for_period(self, student_id: str, month: str): return self.fee_repo.get_fee_for_period(student_id, month)
    def add_fee(self, record: Dict): return self.fee_repo.add_fee(record)
    def update_fee(self, fee_id: str, data: Dict): return self.fee_repo.update_fee(fee_id, data)

    # --- HOMEWORK METHODS (DELEGATED) ---
    def get_all_homework(self) -> List: return self.homework_repo.get_all_homework()
    def get_homework_by_id(self, homework_id: str): return self.homework_repo.get_homework_by_id(homework_id)
    def add_homework_with_submissions(self, homework_record: Dict, submission_records: List[Dict]):
        return self.homework_repo.add_homework_with_submissions(homework_record, submission_records)
    def delete_homework(self, homework_id: str) -> bool: return self.homework_repo.delete_homework(homework_id)
    def get_submissions(self, student_id: Optional[str] = None, homework_id: Optional[str] = None,
                        assigned_since: Optional[date] = None) -> List:
        return self.homework_repo.get_submissions(student_id=student_id, homework_id=homework_id, assigned_since=assigned_since)
    def get_submission_by_id(self, submission_id: str): return self.homework_repo.get_submission_by_id(submission_id)
    def update_submission(self, submission_id: str, data: Dict): return self.homework_repo.update_submission(submission_id, data)

    # --- TEST & RESULT METHODS (DELEGATED) ---
    def get_all_tests(self) -> List: return self.exam_repo.get_all_tests()
    def get_upcoming_tests(self, on_or_after: date) -> List: return self.exam_repo.get_upcoming_tests(on_or_after)
    def get_test_by_id(self, test_id: str): return self.exam_repo.get_test_by_id(test_id)
    def add_test(self, record: Dict): return self.exam_repo.add_test(record)
    def delete_test(self, test_id: str) -> bool: return self.exam_repo.delete_test(test_id)
    def get_results_with_max_marks(self, test_id: Optional[str] = None, student_id: Optional[str] = None,
                                   limit: Optional[int] = None) -> List[Dict]:
        return self.exam_repo.get_results_with_max_marks(test_id=test_id, student_id=student_id, limit=limit)
    def upsert_result(self, record: Dict): return self.exam_repo.upsert_result(record)

    # --- SCHEDULE & SYLLABUS METHODS (DELEGATED) ---
    def get_schedules(self, class_label: Optional[str] = None) -> List: return self.schedule_repo.get_schedules(class_label=class_label)
    def get_schedule_by_id(self, schedule_id: str): return self.schedule_repo.get_schedule_by_id(schedule_id)
    def add_schedule(self, record: Dict): return self.schedule_repo.add_schedule(record)
    def update_schedule(self, schedule_id: str, data: Dict): return self.schedule_repo.update_schedule(schedule_id, data)
    def delete_schedule(self, schedule_id: str) -> bool: return self.schedule_repo.delete_schedule(schedule_id)
    def get_topics(self, class_label: Optional[str] = None, subject: Optional[str] = None) -> List:
        return self.schedule_repo.get_topics(class_label=class_label, subject=subject)
    def get_topic_by_id(self, topic_id: str): return self.schedule_repo.get_topic_by_id(topic_id)
    def add_topic(self, record: Dict): return self.schedule_repo.add_topic(record)
    def update_topic(self, topic_id: str, data: Dict): return self.schedule_repo.update_topic(topic_id, data)
    def delete_topic(self, topic_id: str) -> bool: return self.schedule_repo.delete_topic(topic_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
