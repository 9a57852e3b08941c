# /tutorhub/routers/profiles_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_acting_profile
from ..models import profile_model
from ..services import database_service, student_service

router = APIRouter()


# This route is open: the sign-in front end registers identities before any
# X-Profile-Id exists.
@router.post("", response_model=profile_model.Profile, status_code=status.HTTP_201_CREATED, summary="Register a Profile")
def create_profile(
    profile_create: profile_model.ProfileCreate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    try:
        return student_service.create_profile(profile_data=profile_create, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/me", response_model=profile_model.Profile, summary="The Acting Profile")
def read_own_profile(profile: profile_model.Profile = Depends(get_acting_profile)):
    return profile
