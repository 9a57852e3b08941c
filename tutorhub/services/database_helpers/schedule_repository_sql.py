# /tutorhub/services/database_helpers/schedule_repository_sql.py

from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from tutorhub.db.models.schedule_models import ClassSchedule
from tutorhub.db.models.syllabus_models import SyllabusTopic


class ScheduleRepositorySQL:
    """Queries for the weekly timetable and the syllabus tracker, both teacher-maintained planning data."""

    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Class Schedule Methods ---

    def get_schedules(self, class_label: Optional[str] = None) -> List[ClassSchedule]:
        query = self.db.query(ClassSchedule)
        if class_label:
            query = query.filter(ClassSchedule.class_label == class_label)
        return query.order_by(ClassSchedule.start_time).all()

    def get_schedule_by_id(self, schedule_id: str) -> Optional[ClassSchedule]:
        return self.db.query(ClassSchedule).filter(ClassSchedule.id == schedule_id).first()

    def add_schedule(self, record: Dict) -> ClassSchedule:
        new_schedule = ClassSchedule(**record)
        self.db.add(new_schedule)
        self.db.commit()
        self.db.refresh(new_schedule)
        return new_schedule

    def update_schedule(self, schedule_id: str, data: Dict) -> Optional[ClassSchedule]:
        db_schedule = self.get_schedule_by_id(schedule_id)
        if db_schedule:
            for key, value in data.items():
                setattr(db_schedule, key, value)
            self.db.commit()
            self.db.refresh(db_schedule)
        return db_schedule

    def delete_schedule(self, schedule_id: str) -> bool:
        db_schedule = self.get_schedule_by_id(schedule_id)
        if db_schedule:
            self.db.delete(db_schedule)
            self.db.commit()
            return True
        return False

    # --- Syllabus Methods ---

    def get_topics(self, class_label: Optional[str] = None, subject: Optional[str] = None) -> List[SyllabusTopic]:
        query = self.db.query(SyllabusTopic)
        if class_label:
            query = query.filter(SyllabusTopic.class_label == class_label)
        if subject:
            query = query.filter(SyllabusTopic.subject == subject)
        return query.order_by(SyllabusTopic.created_at.desc()).all()

    def get_topic_by_id(self, topic_id: str) -> Optional[SyllabusTopic]:
        return self.db.query(SyllabusTopic).filter(SyllabusTopic.id == topic_id).first()

    def add_topic(self, record: Dict) -> SyllabusTopic:
        new_topic = SyllabusTopic(**record)
        self.db.add(new_topic)
        self.db.commit()
        self.db.refresh(new_topic)
        return new_topic

    def update_topic(self, topic_id: str, data: Dict) -> Optional[SyllabusTopic]:
        db_topic = self.get_topic_by_id(topic_id)
        if db_topic:
            for key, value in data.items():
                setattr(db_topic, key, value)
            self.db.commit()
            self.db.refresh(db_topic)
        return db_topic

    def delete_topic(self, topic_id: str) -> bool:
        db_topic = self.get_topic_by_id(topic_id)
        if db_topic:
            self.db.delete(db_topic)
            self.db.commit()
            return True
        return False
