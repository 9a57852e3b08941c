# /tutorhub/routers/exams_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import get_teacher, get_viewable_student
from ..models import exam_model
from ..models.profile_model import Profile
from ..services import database_service, exam_service

router = APIRouter()


@router.get("", response_model=List[exam_model.Test], summary="List Tests")
def list_tests(
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return exam_service.list_tests(db=db)


@router.post("", response_model=exam_model.Test, status_code=status.HTTP_201_CREATED, summary="Create a Test")
def create_test(
    test_create: exam_model.TestCreate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return exam_service.create_test(test_data=test_create, created_by=teacher, db=db)


@router.get("/results", response_model=List[exam_model.ScoredResult], summary="All Results, Scored")
def list_results(
    scale: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        return exam_service.get_scored_results(db=db, scale_name=scale)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/summary", response_model=exam_model.PerformanceSummary, summary="Overall Performance Summary")
def get_overall_summary(
    scale: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        return exam_service.get_performance_summary(db=db, scale_name=scale)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{test_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Test and Its Results")
def delete_test(
    test_id: str,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    if not exam_service.delete_test(test_id=test_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Test with ID {test_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{test_id}/results", response_model=exam_model.ScoredResult, summary="Record a Student's Marks")
def record_result(
    test_id: str,
    result: exam_model.ResultCreate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        return exam_service.record_result(test_id=test_id, result=result, db=db)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{test_id}/summary", response_model=exam_model.PerformanceSummary, summary="Performance Summary for One Test")
def get_test_summary(
    test_id: str,
    scale: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    if db.get_test_by_id(test_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Test with ID {test_id} not found")
    try:
        return exam_service.get_performance_summary(db=db, test_id=test_id, scale_name=scale)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# --- STUDENT-SCOPED ENDPOINTS ---

@router.get("/students/{student_id}/results", response_model=List[exam_model.ScoredResult], summary="A Student's Results")
def get_student_results(
    student=Depends(get_viewable_student),
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    return exam_service.get_scored_results(db=db, student_id=student.id)


@router.get("/students/{student_id}/summary", response_model=exam_model.PerformanceSummary, summary="A Student's Performance Summary")
def get_student_summary(
    student=Depends(get_viewable_student),
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    return exam_service.get_performance_summary(db=db, student_id=student.id)
