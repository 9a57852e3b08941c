# /tutorhub/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List, Optional

from ..core.deps import get_teacher, get_viewable_student
from ..models import student_model
from ..models.profile_model import Profile
from ..services import student_service, database_service

router = APIRouter()


@router.get("", response_model=List[student_model.Student], summary="List the Student Roster")
def list_students(
    class_label: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return student_service.list_students(db=db, class_label=class_label)


@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Enroll a New Student")
def create_student(
    student_create: student_model.StudentCreate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        return student_service.create_student(student_data=student_create, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Single Student")
def get_student(student=Depends(get_viewable_student)):
    return student


@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student")
def update_student(
    student_id: str,
    student_update: student_model.StudentUpdate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        updated_student = student_service.update_student(student_id=student_id, student_update=student_update, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return updated_student


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove a Student")
def delete_student(
    student_id: str,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    if not student_service.delete_student(student_id=student_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
