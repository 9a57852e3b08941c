# /tutorhub/services/schedule_service.py

import uuid
from typing import List, Optional

from ..core.logging_config import get_logger, log_with_context
from ..models import schedule_model
from ..models.profile_model import Profile
from .database_service import DatabaseService
from .record_boundary import narrow
from .reporting_helpers import schedule_matrix
from .reporting_helpers.errors import ScheduleConflict

logger = get_logger("reporting")


def list_schedules(db: DatabaseService, class_label: Optional[str] = None) -> List[schedule_model.ScheduleEntry]:
    return narrow(db.get_schedules(class_label=class_label), schedule_model.ScheduleEntry)


def _ensure_slot_free(candidate: schedule_model.ScheduleEntry, db: DatabaseService) -> None:
    """
    Lays the stored timetable out with `candidate` in place and raises
    ScheduleConflict if it lands on an occupied day and slot. Every class is
    checked together because one tutor teaches them all, and the unfiltered
    timetable has to stay readable too.
    """
    others = [e for e in list_schedules(db) if e.id != candidate.id]
    try:
        schedule_matrix.build(others + [candidate])
    except ScheduleConflict as e:
        log_with_context(logger, "WARNING", "Rejected schedule write that would double-book a slot",
                         context={"schedule_id": candidate.id, "class_label": candidate.class_label},
                         extra_data={"day": e.day, "slot": e.slot, "entries": [c.id for c in e.entries]})
        raise


def create_schedule(entry: schedule_model.ScheduleEntryCreate, created_by: Profile, db: DatabaseService) -> schedule_model.ScheduleEntry:
    """Adds a weekly slot. Raises ScheduleConflict if the day and slot are already taken."""
    record = entry.model_dump(mode="json")
    record['id'] = f"sch_{uuid.uuid4().hex[:12]}"
    record['created_by'] = created_by.id
    _ensure_slot_free(schedule_model.ScheduleEntry.model_validate(record), db)
    return schedule_model.ScheduleEntry.model_validate(db.add_schedule(record))


def update_schedule(schedule_id: str, update: schedule_model.ScheduleEntryUpdate,
                    db: DatabaseService) -> Optional[schedule_model.ScheduleEntry]:
    update_data = update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")

    existing = db.get_schedule_by_id(schedule_id)
    if existing is None:
        return None
    # Re-validate the merged entry so a partial update cannot leave end before start.
    merged = schedule_model.ScheduleEntry.model_validate(existing).model_dump(mode="json")
    merged.update(update_data)
    _ensure_slot_free(schedule_model.ScheduleEntry.model_validate(merged), db)

    return schedule_model.ScheduleEntry.model_validate(db.update_schedule(schedule_id, update_data))


def delete_schedule(schedule_id: str, db: DatabaseService) -> bool:
    return db.delete_schedule(schedule_id)


def get_schedule_matrix(db: DatabaseService, class_label: Optional[str] = None) -> schedule_model.ScheduleMatrix:
    """Raises ScheduleConflict when two stored entries claim the same day and slot."""
    entries = list_schedules(db, class_label=class_label)
    try:
        return schedule_matrix.build(entries, class_label=class_label)
    except ScheduleConflict as e:
        log_with_context(logger, "WARNING", "Schedule conflict while building timetable",
                         context={"class_label": class_label},
                         extra_data={"day": e.day, "slot": e.slot, "entries": [c.id for c in e.entries]})
        raise
