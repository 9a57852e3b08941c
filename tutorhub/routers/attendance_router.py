# /tutorhub/routers/attendance_router.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from ..core.deps import get_teacher, get_viewable_student
from ..models import attendance_model
from ..models.profile_model import Profile
from ..services import attendance_service, database_service

router = APIRouter()


@router.get("/register", response_model=List[attendance_model.RegisterEntry], summary="Daily Attendance Register")
def get_register(
    class_date: date,
    class_label: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    """Every roster student (optionally one class) with their mark for the day, or 'unmarked'."""
    return attendance_service.get_daily_register(on=class_date, db=db, class_label=class_label)


@router.post("", response_model=attendance_model.AttendanceRecord, summary="Mark One Student")
def mark_attendance(
    mark: attendance_model.AttendanceMark,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        return attendance_service.mark_attendance(mark=mark, marked_by=teacher, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/bulk", response_model=attendance_model.BulkMarkResponse, summary="Mark a Whole Class")
def mark_bulk_attendance(
    mark: attendance_model.BulkAttendanceMark,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return attendance_service.mark_bulk_attendance(mark=mark, marked_by=teacher, db=db)


@router.get("/summary", response_model=List[attendance_model.StudentAttendanceSummary], summary="Class Attendance Summary")
def get_class_summary(
    class_label: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return attendance_service.get_class_summary(db=db, class_label=class_label, start=start, end=end)


@router.get("/export", summary="Export Attendance as CSV", response_class=StreamingResponse)
def export_attendance_csv(
    class_label: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    csv_string = attendance_service.export_attendance_as_csv(db=db, class_label=class_label, start=start, end=end)
    suffix = class_label.replace(' ', '_').lower() if class_label else "all"
    file_name = f"attendance_{suffix}.csv"
    return StreamingResponse(iter([csv_string]), media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={file_name}"})


# --- STUDENT-SCOPED ENDPOINTS ---

@router.get("/students/{student_id}/summary", response_model=attendance_model.AttendanceSummary, summary="Student Attendance Summary")
def get_student_summary(
    start: Optional[date] = None,
    end: Optional[date] = None,
    student=Depends(get_viewable_student),
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    return attendance_service.get_student_summary(student_id=student.id, db=db, start=start, end=end)


@router.get("/students/{student_id}/history", response_model=List[attendance_model.AttendanceRecord], summary="Student Attendance History")
def get_student_history(
    start: Optional[date] = None,
    end: Optional[date] = None,
    student=Depends(get_viewable_student),
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    return attendance_service.get_student_history(student_id=student.id, db=db, start=start, end=end)
