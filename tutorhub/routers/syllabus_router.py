# /tutorhub/routers/syllabus_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import get_acting_profile, get_teacher
from ..models import syllabus_model
from ..models.profile_model import Profile
from ..services import database_service, syllabus_service

router = APIRouter()


@router.get("", response_model=List[syllabus_model.Topic], summary="List Syllabus Topics")
def list_topics(
    class_label: Optional[str] = None,
    subject: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    profile: Profile = Depends(get_acting_profile),
):
    return syllabus_service.list_topics(db=db, class_label=class_label, subject=subject)


@router.get("/progress", response_model=List[syllabus_model.SyllabusProgress], summary="Completion per Class and Subject")
def get_progress(
    class_label: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    profile: Profile = Depends(get_acting_profile),
):
    return syllabus_service.get_progress(db=db, class_label=class_label)


@router.post("", response_model=syllabus_model.Topic, status_code=status.HTTP_201_CREATED, summary="Add a Syllabus Topic")
def create_topic(
    topic_create: syllabus_model.TopicCreate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return syllabus_service.create_topic(topic_data=topic_create, created_by=teacher, db=db)


@router.put("/{topic_id}/status", response_model=syllabus_model.Topic, summary="Change a Topic's Status")
def update_topic_status(
    topic_id: str,
    update: syllabus_model.TopicStatusUpdate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    updated = syllabus_service.update_topic_status(topic_id=topic_id, update=update, db=db)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Topic with ID {topic_id} not found")
    return updated


@router.delete("/{topic_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Syllabus Topic")
def delete_topic(
    topic_id: str,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    if not syllabus_service.delete_topic(topic_id=topic_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Topic with ID {topic_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
