# /tutorhub/services/database_helpers/homework_repository_sql.py

"""
Queries for homework assignments and their per-student submission rows.
"""

from datetime import date
from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from tutorhub.db.models.homework_models import Homework, HomeworkSubmission


class HomeworkRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Homework Methods ---

    def get_all_homework(self) -> List[Homework]:
        return self.db.query(Homework).order_by(Homework.created_at.desc()).all()

    def get_homework_by_id(self, homework_id: str) -> Optional[Homework]:
        return self.db.query(Homework).filter(Homework.id == homework_id).first()

    def add_homework_with_submissions(self, homework_record: Dict, submission_records: List[Dict]) -> Homework:
        """
        Creates an assignment together with its pending submission rows in one
        transaction, so an assignment never exists without its roster.
        """
        new_homework = Homework(**homework_record)
        self.db.add(new_homework)
        for record in submission_records:
            self.db.add(HomeworkSubmission(**record))
        self.db.commit()
        self.db.refresh(new_homework)
        return new_homework

    def delete_homework(self, homework_id: str) -> bool:
        """Deletes an assignment; its submissions go with it via the cascade."""
        db_homework = self.get_homework_by_id(homework_id)
        if db_homework:
            self.db.delete(db_homework)
            self.db.commit()
            return True
        return False

    # --- Submission Methods ---

    def get_submissions(
        self,
        student_id: Optional[str] = None,
        homework_id: Optional[str] = None,
        assigned_since: Optional[date] = None,
    ) -> List[HomeworkSubmission]:
        query = self.db.query(HomeworkSubmission)
        if student_id:
            query = query.filter(HomeworkSubmission.student_id == student_id)
        if homework_id:
            query = query.filter(HomeworkSubmission.homework_id == homework_id)
        if assigned_since:
            query = query.join(Homework, HomeworkSubmission.homework_id == Homework.id).filter(
                Homework.assigned_date >= assigned_since
            )
        return query.all()

    def get_submission_by_id(self, submission_id: str) -> Optional[HomeworkSubmission]:
        return self.db.query(HomeworkSubmission).filter(HomeworkSubmission.id == submission_id).first()

    def update_submission(self, submission_id: str, data: Dict) -> Optional[HomeworkSubmission]:
        db_submission = self.get_submission_by_id(submission_id)
        if db_submission:
            for key, value in data.items():
                setattr(db_submission, key, value)
            self.db.commit()
            self.db.refresh(db_submission)
        return db_submission
