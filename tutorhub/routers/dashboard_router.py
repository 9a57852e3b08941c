# /tutorhub/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, HTTPException, status

# --- Service and Model Imports ---
from ..core.deps import get_parent, get_student, get_teacher
from ..models.dashboard_model import ParentDashboardStats, StudentDashboardStats, TeacherDashboardStats
from ..models.profile_model import Profile
from ..services import dashboard_service, student_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("/teacher", response_model=TeacherDashboardStats, summary="Teacher Dashboard Cards")
def get_teacher_dashboard(
    db: DatabaseService = Depends(get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return dashboard_service.get_teacher_stats(db=db)


@router.get("/student", response_model=StudentDashboardStats, summary="Student Dashboard Cards")
def get_student_dashboard(
    db: DatabaseService = Depends(get_db_service),
    profile: Profile = Depends(get_student),
):
    student = student_service.get_own_student_record(profile_id=profile.id, db=db)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No student record is linked to this profile.")
    return dashboard_service.get_student_stats(student=student, db=db)


@router.get("/parent/{student_id}", response_model=ParentDashboardStats, summary="Parent Dashboard Cards for One Child")
def get_parent_dashboard(
    student_id: str,
    db: DatabaseService = Depends(get_db_service),
    parent: Profile = Depends(get_parent),
):
    child = student_service.get_child_for_parent(parent_id=parent.id, student_id=student_id, db=db)
    if child is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return dashboard_service.get_parent_stats(child=child, db=db)
