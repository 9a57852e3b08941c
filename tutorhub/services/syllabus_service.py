# /tutorhub/services/syllabus_service.py

import uuid
from datetime import date
from typing import List, Optional

from ..models import syllabus_model
from ..models.profile_model import Profile
from .database_service import DatabaseService
from .record_boundary import narrow
from .reporting_helpers import syllabus_progress


def _completion_date(status: syllabus_model.SyllabusStatus, today: Optional[date] = None) -> Optional[date]:
    # Only completed topics carry a completion date.
    return (today or date.today()) if status == syllabus_model.SyllabusStatus.COMPLETED else None


def list_topics(db: DatabaseService, class_label: Optional[str] = None,
                subject: Optional[str] = None) -> List[syllabus_model.Topic]:
    return narrow(db.get_topics(class_label=class_label, subject=subject), syllabus_model.Topic)


def create_topic(topic_data: syllabus_model.TopicCreate, created_by: Profile, db: DatabaseService) -> syllabus_model.Topic:
    record = topic_data.model_dump(mode="json")
    record['id'] = f"syl_{uuid.uuid4().hex[:12]}"
    record['created_by'] = created_by.id
    record['completion_date'] = _completion_date(topic_data.status)
    return syllabus_model.Topic.model_validate(db.add_topic(record))


def update_topic_status(topic_id: str, update: syllabus_model.TopicStatusUpdate,
                        db: DatabaseService) -> Optional[syllabus_model.Topic]:
    updated = db.update_topic(topic_id, {
        "status": update.status.value,
        "completion_date": _completion_date(update.status),
    })
    return syllabus_model.Topic.model_validate(updated) if updated else None


def delete_topic(topic_id: str, db: DatabaseService) -> bool:
    return db.delete_topic(topic_id)


def get_progress(db: DatabaseService, class_label: Optional[str] = None) -> List[syllabus_model.SyllabusProgress]:
    return syllabus_progress.summarize(list_topics(db, class_label=class_label))
