# /tutorhub/db/models/syllabus_models.py

from sqlalchemy import Column, String, Date, ForeignKey

from ..base_class import Base, TimestampMixin


class SyllabusTopic(TimestampMixin, Base):
    __tablename__ = "syllabus_topics"

    id = Column(String, primary_key=True, index=True)
    class_label = Column(String, index=True, nullable=False)
    subject = Column(String, index=True, nullable=False)
    topic = Column(String, nullable=False)
    description = Column(String, nullable=True)
    # One of "pending", "in-progress", "completed".
    status = Column(String, nullable=False, default="pending")
    completion_date = Column(Date, nullable=True)
    created_by = Column(String, ForeignKey("profiles.id"), nullable=False)
