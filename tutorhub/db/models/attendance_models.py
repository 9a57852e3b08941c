# /tutorhub/db/models/attendance_models.py

from sqlalchemy import Column, String, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base, TimestampMixin


class AttendanceRecord(TimestampMixin, Base):
    """
    One student's attendance on one calendar day.

    The (student_id, class_date) pair is unique; marking attendance again for
    the same day replaces the status instead of adding a row.
    """
    __tablename__ = "attendance"
    __table_args__ = (UniqueConstraint("student_id", "class_date", name="uq_attendance_student_date"),)

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    class_date = Column(Date, nullable=False, index=True)
    status = Column(String, nullable=False, default="present")
    notes = Column(String, nullable=True)
    marked_by = Column(String, ForeignKey("profiles.id"), nullable=False)

    student = relationship("Student", back_populates="attendance")
