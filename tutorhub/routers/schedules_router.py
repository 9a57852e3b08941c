# /tutorhub/routers/schedules_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import get_acting_profile, get_teacher
from ..models import schedule_model
from ..models.profile_model import Profile
from ..services import database_service, schedule_service
from ..services.reporting_helpers.errors import ScheduleConflict

router = APIRouter()


def _conflict(e: ScheduleConflict) -> HTTPException:
    """409 naming the day, the slot and every entry that claims it."""
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={
            "message": str(e),
            "day": e.day,
            "slot": e.slot,
            "entryIds": [entry.id for entry in e.entries],
        },
    )


@router.get("", response_model=List[schedule_model.ScheduleEntry], summary="List Schedule Entries")
def list_schedules(
    class_label: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    profile: Profile = Depends(get_acting_profile),
):
    return schedule_service.list_schedules(db=db, class_label=class_label)


@router.get("/matrix", response_model=schedule_model.ScheduleMatrix, summary="Weekly Timetable Grid")
def get_schedule_matrix(
    class_label: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    profile: Profile = Depends(get_acting_profile),
):
    """Day x time-slot grid. Responds 409 naming the entries if two share a cell."""
    try:
        return schedule_service.get_schedule_matrix(db=db, class_label=class_label)
    except ScheduleConflict as e:
        raise _conflict(e)


@router.post("", response_model=schedule_model.ScheduleEntry, status_code=status.HTTP_201_CREATED, summary="Add a Class to the Timetable")
def create_schedule(
    entry: schedule_model.ScheduleEntryCreate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        return schedule_service.create_schedule(entry=entry, created_by=teacher, db=db)
    except ScheduleConflict as e:
        raise _conflict(e)


@router.put("/{schedule_id}", response_model=schedule_model.ScheduleEntry, summary="Update a Timetable Entry")
def update_schedule(
    schedule_id: str,
    update: schedule_model.ScheduleEntryUpdate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        updated = schedule_service.update_schedule(schedule_id=schedule_id, update=update, db=db)
    except ScheduleConflict as e:
        raise _conflict(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Schedule entry with ID {schedule_id} not found")
    return updated


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove a Timetable Entry")
def delete_schedule(
    schedule_id: str,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    if not schedule_service.delete_schedule(schedule_id=schedule_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Schedule entry with ID {schedule_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
