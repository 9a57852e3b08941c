# /tutorhub/db/models/schedule_models.py

from sqlalchemy import Column, String, ForeignKey

from ..base_class import Base, TimestampMixin


class ClassSchedule(TimestampMixin, Base):
    """
    A recurring weekly class slot. Times are stored as zero-padded 24-hour
    "HH:MM" strings.
    """
    __tablename__ = "class_schedules"

    id = Column(String, primary_key=True, index=True)
    subject = Column(String, nullable=False)
    class_label = Column(String, index=True, nullable=False)
    day = Column(String, index=True, nullable=False)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    created_by = Column(String, ForeignKey("profiles.id"), nullable=False)
