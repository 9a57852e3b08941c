# /tutorhub/routers/homework_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import get_parent, get_teacher, get_viewable_student
from ..models import homework_model
from ..models.profile_model import Profile
from ..services import database_service, homework_service

router = APIRouter()


# --- HOMEWORK COLLECTION ENDPOINTS (/api/homework) ---

@router.get("", response_model=List[homework_model.Homework], summary="List Homework Assignments")
def list_homework(
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return homework_service.list_homework(db=db)


@router.post("", response_model=homework_model.Homework, status_code=status.HTTP_201_CREATED, summary="Assign Homework")
def assign_homework(
    homework_create: homework_model.HomeworkCreate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        return homework_service.assign_homework(homework_data=homework_create, assigned_by=teacher, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/progress", response_model=List[homework_model.AssignmentProgress], summary="Progress per Assignment")
def get_assignment_progress(
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return homework_service.get_assignment_progress(db=db)


@router.get("/status-counts", response_model=homework_model.StatusCounts, summary="Submission Counts by Status")
def get_status_counts(
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return homework_service.get_status_counts(db=db)


@router.delete("/{homework_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Assignment and Its Submissions")
def delete_homework(
    homework_id: str,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    if not homework_service.delete_homework(homework_id=homework_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Homework with ID {homework_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{homework_id}/submissions", response_model=List[homework_model.SubmissionRecord], summary="Submissions for One Assignment")
def list_submissions(
    homework_id: str,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return homework_service.list_submissions(db=db, homework_id=homework_id)


# --- SUBMISSION ENDPOINTS ---

@router.put("/submissions/{submission_id}", response_model=homework_model.SubmissionRecord, summary="Update a Submission's Status")
def update_submission_status(
    submission_id: str,
    update: homework_model.SubmissionStatusUpdate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    updated = homework_service.update_submission_status(submission_id=submission_id, update=update, db=db)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Submission with ID {submission_id} not found")
    return updated


@router.post("/submissions/{submission_id}/acknowledge", response_model=homework_model.SubmissionRecord, summary="Parent Acknowledges a Submission")
def acknowledge_submission(
    submission_id: str,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    parent: Profile = Depends(get_parent),
):
    updated = homework_service.acknowledge_submission(submission_id=submission_id, parent=parent, db=db)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Submission with ID {submission_id} not found")
    return updated


# --- STUDENT-SCOPED ENDPOINTS ---

@router.get("/students/{student_id}/submissions", response_model=List[homework_model.SubmissionRecord], summary="A Student's Submissions")
def get_student_submissions(
    student=Depends(get_viewable_student),
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    return homework_service.list_submissions(db=db, student_id=student.id)


@router.get("/students/{student_id}/progress", response_model=homework_model.HomeworkProgress, summary="A Student's Homework Progress")
def get_student_progress(
    student=Depends(get_viewable_student),
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    return homework_service.get_student_progress(student_id=student.id, db=db)
