# /tutorhub/db/models/exam_models.py

from sqlalchemy import Column, String, Date, Integer, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base, TimestampMixin


class Test(TimestampMixin, Base):
    """
    SQLAlchemy model representing a scheduled test.
    """
    __tablename__ = "tests"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    subject = Column(String, index=True, nullable=False)
    test_date = Column(Date, nullable=False, index=True)
    max_marks = Column(Integer, nullable=False)
    created_by = Column(String, ForeignKey("profiles.id"), nullable=False)

    results = relationship("TestResult", back_populates="test", cascade="all, delete-orphan")


class TestResult(TimestampMixin, Base):
    """
    Marks obtained by one student in one test. Percentage and grade are
    derived on read and never stored.
    """
    __tablename__ = "test_results"
    __table_args__ = (UniqueConstraint("test_id", "student_id", name="uq_result_test_student"),)

    id = Column(String, primary_key=True, index=True)
    test_id = Column(String, ForeignKey("tests.id"), nullable=False, index=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    marks_obtained = Column(Float, nullable=False)

    test = relationship("Test", back_populates="results")
    student = relationship("Student", back_populates="results")
