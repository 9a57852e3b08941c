# /tutorhub/services/database_helpers/profile_student_repository_sql.py

"""
This module contains the SQLAlchemy queries for the Profile and Student
tables. It is the direct interface to the database for identity and roster
data.
"""

from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from tutorhub.db.models.profile_student_models import Profile, Student


class ProfileStudentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Profile Methods ---

    def get_profile_by_id(self, profile_id: str) -> Optional[Profile]:
        return self.db.query(Profile).filter(Profile.id == profile_id).first()

    def add_profile(self, record: Dict) -> Profile:
        new_profile = Profile(**record)
        self.db.add(new_profile)
        self.db.commit()
        self.db.refresh(new_profile)
        return new_profile

    # --- Student Methods ---

    def get_all_students(self, class_label: Optional[str] = None) -> List[Student]:
        """Every student on the roster ordered by name, optionally limited to one class."""
        query = self.db.query(Student)
        if class_label:
            query = query.filter(Student.class_label == class_label)
        return query.order_by(Student.name).all()

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def get_student_by_profile_id(self, profile_id: str) -> Optional[Student]:
        """Resolves the roster entry a student-role profile signs in as."""
        return self.db.query(Student).filter(Student.profile_id == profile_id).first()

    def get_students_by_parent_id(self, parent_id: str) -> List[Student]:
        return self.db.query(Student).filter(Student.parent_id == parent_id).order_by(Student.name).all()

    def add_student(self, record: Dict) -> Student:
        record['subjects'] = list(record.get('subjects') or [])
        new_student = Student(**record)
        self.db.add(new_student)
        self.db.commit()
        self.db.refresh(new_student)
        return new_student

    def update_student(self, student_id: str, data: Dict) -> Optional[Student]:
        db_student = self.get_student_by_id(student_id)
        if db_student:
            for key, value in data.items():
                setattr(db_student, key, value)
            self.db.commit()
            self.db.refresh(db_student)
        return db_student

    def delete_student(self, student_id: str) -> bool:
        """Deletes a student. The cascade on the model removes their dependent rows."""
        db_student = self.get_student_by_id(student_id)
        if db_student:
            self.db.delete(db_student)
            self.db.commit()
            return True
        return False
