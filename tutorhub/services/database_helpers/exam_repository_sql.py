# /tutorhub/services/database_helpers/exam_repository_sql.py

from datetime import date
from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from tutorhub.db.models.exam_models import Test, TestResult


class ExamRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Test Methods ---

    def get_all_tests(self) -> List[Test]:
        return self.db.query(Test).order_by(Test.created_at.desc()).all()

    def get_upcoming_tests(self, on_or_after: date) -> List[Test]:
        return self.db.query(Test).filter(Test.test_date >= on_or_after).order_by(Test.test_date).all()

    def get_test_by_id(self, test_id: str) -> Optional[Test]:
        return self.db.query(Test).filter(Test.id == test_id).first()

    def add_test(self, record: Dict) -> Test:
        new_test = Test(**record)
        self.db.add(new_test)
        self.db.commit()
        self.db.refresh(new_test)
        return new_test

    def delete_test(self, test_id: str) -> bool:
        """Deletes a test; its results go with it via the cascade."""
        db_test = self.get_test_by_id(test_id)
        if db_test:
            self.db.delete(db_test)
            self.db.commit()
            return True
        return False

    # --- Result Methods ---

    def get_results_with_max_marks(
        self,
        test_id: Optional[str] = None,
        student_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Dict]:
        """
        Results joined with their test's max marks, latest test date first. Returned as
        plain dictionaries because the shape spans two tables.
        """
        query = self.db.query(TestResult, Test.max_marks).join(Test, TestResult.test_id == Test.id)
        if test_id:
            query = query.filter(TestResult.test_id == test_id)
        if student_id:
            query = query.filter(TestResult.student_id == student_id)
        # Most recent test first; created_at only breaks ties between tests on the same day.
        query = query.order_by(Test.test_date.desc(), TestResult.created_at.desc())
        if limit:
            query = query.limit(limit)

        return [
            {
                "id": result.id,
                "test_id": result.test_id,
                "student_id": result.student_id,
                "marks_obtained": result.marks_obtained,
                "max_marks": max_marks,
            }
            for result, max_marks in query.all()
        ]

    def upsert_result(self, record: Dict) -> TestResult:
        """One result per (test, student): recording again replaces the marks."""
        existing = (
            self.db.query(TestResult)
            .filter(TestResult.test_id == record['test_id'], TestResult.student_id == record['student_id'])
            .first()
        )
        if existing:
            existing.marks_obtained = record['marks_obtained']
            saved = existing
        else:
            saved = TestResult(**record)
            self.db.add(saved)
        self.db.commit()
        self.db.refresh(saved)
        return saved
