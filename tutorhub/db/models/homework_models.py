# /tutorhub/db/models/homework_models.py

"""
ORM models for homework assignments and the per-student submission rows
created when an assignment is handed out.
"""

from sqlalchemy import Column, String, Date, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base, TimestampMixin


class Homework(TimestampMixin, Base):
    __tablename__ = "homework"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    subject = Column(String, index=True, nullable=False)
    description = Column(String, nullable=True)
    assigned_date = Column(Date, nullable=False, server_default=func.current_date())
    due_date = Column(Date, nullable=False)
    assigned_by = Column(String, ForeignKey("profiles.id"), nullable=False)

    # Deleting an assignment removes every submission row that belongs to it.
    submissions = relationship("HomeworkSubmission", back_populates="homework", cascade="all, delete-orphan")


class HomeworkSubmission(TimestampMixin, Base):
    """
    The state of one assigned homework for one student. Exactly one row exists
    per (homework, student) pairing.
    """
    __tablename__ = "homework_submissions"
    __table_args__ = (UniqueConstraint("homework_id", "student_id", name="uq_submission_homework_student"),)

    id = Column(String, primary_key=True, index=True)
    homework_id = Column(String, ForeignKey("homework.id"), nullable=False, index=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    status = Column(String, nullable=False, default="pending")
    submitted_date = Column(Date, nullable=True)
    parent_acknowledged = Column(Boolean, nullable=True, default=False)

    homework = relationship("Homework", back_populates="submissions")
    student = relationship("Student", back_populates="submissions")
