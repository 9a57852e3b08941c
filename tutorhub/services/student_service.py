# /tutorhub/services/student_service.py

"""
Business logic for the student roster: create, read, update and delete, plus
the scope checks the parent and student dashboards rely on. Sign-in profiles
are registered here too, since a student row links to them.
"""

import uuid
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from ..core.logging_config import get_logger, log_with_context
from ..models import profile_model, student_model
from .database_service import DatabaseService

logger = get_logger("db")


def list_students(db: DatabaseService, class_label: Optional[str] = None) -> List:
    return db.get_all_students(class_label=class_label)


def get_student(student_id: str, db: DatabaseService):
    return db.get_student_by_id(student_id)


def create_student(student_data: student_model.StudentCreate, db: DatabaseService):
    """Stamps a new id on the student and persists it. Linked profiles must exist."""
    for field in ("parent_id", "profile_id"):
        profile_id = getattr(student_data, field)
        if profile_id and not db.get_profile_by_id(profile_id):
            raise ValueError(f"Profile with ID {profile_id} not found")

    record = student_data.model_dump()
    record['id'] = f"stu_{uuid.uuid4().hex[:12]}"
    new_student = db.add_student(record)
    log_with_context(logger, "INFO", "Student created",
                     context={"student_id": new_student.id, "class_label": new_student.class_label})
    return new_student


def update_student(student_id: str, student_update: student_model.StudentUpdate, db: DatabaseService):
    update_data = student_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    if update_data.get("parent_id") and not db.get_profile_by_id(update_data["parent_id"]):
        raise ValueError(f"Profile with ID {update_data['parent_id']} not found")
    return db.update_student(student_id, update_data)


def delete_student(student_id: str, db: DatabaseService) -> bool:
    was_deleted = db.delete_student(student_id)
    if was_deleted:
        log_with_context(logger, "INFO", "Student deleted", context={"student_id": student_id})
    return was_deleted


def get_child_for_parent(parent_id: str, student_id: str, db: DatabaseService):
    """
    Returns the student only if it is linked to `parent_id`. A parent asking
    about someone else's child gets None, exactly as if the child did not exist.
    """
    student = db.get_student_by_id(student_id)
    if student is None or student.parent_id != parent_id:
        return None
    return student


def get_own_student_record(profile_id: str, db: DatabaseService):
    """The roster entry behind a student-role profile, or None if it is not linked."""
    return db.get_student_by_profile_id(profile_id)


def can_view_student(profile, student) -> bool:
    """Teachers see every student; a student sees themself; a parent sees their own children."""
    if profile.user_type.value == "teacher":
        return True
    if profile.user_type.value == "student":
        return student.profile_id == profile.id
    if profile.user_type.value == "parent":
        return student.parent_id == profile.id
    return False


# --- Profiles ---

def create_profile(profile_data: profile_model.ProfileCreate, db: DatabaseService):
    """Registers a sign-in identity. Emails are unique across all roles."""
    record = profile_data.model_dump(mode="json")
    record['id'] = f"prf_{uuid.uuid4().hex[:12]}"
    try:
        new_profile = db.add_profile(record)
    except IntegrityError:
        db.session.rollback()
        raise ValueError(f"A profile with email {profile_data.email} already exists.")
    log_with_context(logger, "INFO", "Profile created",
                     context={"profile_id": new_profile.id, "user_type": new_profile.user_type})
    return new_profile
