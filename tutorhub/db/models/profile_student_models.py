# /tutorhub/db/models/profile_student_models.py

"""
This module defines the SQLAlchemy ORM models for the `Profile` and `Student`
entities.

A Profile is the acting identity behind every request (a teacher, a student
or a parent). A Student is a roster entry owned by the tuition center; it may
point at the Profile a student logs in with and at the Profile of a parent.
"""

from sqlalchemy import Column, String, JSON, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base, TimestampMixin


class Profile(TimestampMixin, Base):
    """
    SQLAlchemy model representing a signed-up user of the application.
    `user_type` is one of "teacher", "student" or "parent".
    """
    __tablename__ = "profiles"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String, nullable=True)
    user_type = Column(String, index=True, nullable=False)

    # Students whose parent is this profile.
    children = relationship("Student", back_populates="parent", foreign_keys="Student.parent_id")


class Student(TimestampMixin, Base):
    """
    SQLAlchemy model representing a single enrolled student.

    Attendance, fee, homework-submission and test-result rows reference a
    Student; deleting the Student removes them.
    """
    __tablename__ = "students"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    class_label = Column(String, index=True, nullable=False)
    subjects = Column(JSON, nullable=False, default=list)

    # The parent profile, if one is linked.
    parent_id = Column(String, ForeignKey("profiles.id"), nullable=True, index=True)
    # The profile the student signs in with, if the student has an account.
    profile_id = Column(String, ForeignKey("profiles.id"), nullable=True, unique=True)

    parent = relationship("Profile", back_populates="children", foreign_keys=[parent_id])

    attendance = relationship("AttendanceRecord", back_populates="student", cascade="all, delete-orphan")
    fees = relationship("FeeRecord", back_populates="student", cascade="all, delete-orphan")
    submissions = relationship("HomeworkSubmission", back_populates="student", cascade="all, delete-orphan")
    results = relationship("TestResult", back_populates="student", cascade="all, delete-orphan")
