"""Endpoints for the authenticated user's profile."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from agrilink.application.use_cases.users import update_profile
from agrilink.domain.entities import User
from agrilink.infrastructure.database import get_db
from agrilink.interfaces.api.dependencies import get_current_user
from agrilink.interfaces.api.schemas import ProfileUpdate, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    """Return the profile of the authenticated user."""

    return UserRead.model_validate(current_user)


@router.patch("/me", response_model=UserRead)
def update_current_user(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    """Update the editable profile fields of the authenticated user."""

    changes = payload.model_dump(exclude_unset=True)
    try:
        user = update_profile(db, user_id=current_user.id, **changes)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return UserRead.model_validate(user)
