# /tutorhub/core/deps.py

"""
Request dependencies that resolve the acting identity.

Sign-in happens in front of this API; every request carries the caller's
profile id in the `X-Profile-Id` header. The id is resolved to a Profile here
and handed explicitly to the services, which never look it up on their own.
"""

from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, status

from ..models.profile_model import Profile, UserType
from ..services.database_service import DatabaseService, get_db_service
from ..services import student_service


def get_acting_profile(
    x_profile_id: Optional[str] = Header(default=None, alias="X-Profile-Id"),
    db: DatabaseService = Depends(get_db_service),
) -> Profile:
    db_profile = db.get_profile_by_id(x_profile_id) if x_profile_id else None
    if db_profile is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown or missing acting profile.",
        )
    return Profile.model_validate(db_profile)


def require_role(*roles: UserType) -> Callable[..., Profile]:
    """Builds a dependency that admits only profiles of the given user types."""
    allowed = {r.value for r in roles}

    def _check(profile: Profile = Depends(get_acting_profile)) -> Profile:
        if profile.user_type.value not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"This action requires one of the roles: {', '.join(sorted(allowed))}.",
            )
        return profile

    return _check


get_teacher = require_role(UserType.TEACHER)
get_student = require_role(UserType.STUDENT)
get_parent = require_role(UserType.PARENT)


def get_viewable_student(
    student_id: str,
    profile: Profile = Depends(get_acting_profile),
    db: DatabaseService = Depends(get_db_service),
):
    """
    Resolves the `student_id` path parameter to a Student the acting profile
    may see. Students outside the caller's scope are reported as not found.
    """
    student = db.get_student_by_id(student_id)
    if student is None or not student_service.can_view_student(profile, student):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return student
