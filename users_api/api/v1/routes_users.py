# File: users_api/api/v1/routes_users.py

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from users_api.api.deps import get_db
from users_api.core.config import settings
from users_api.repositories import user_repo
from users_api.schemas.user import UserCreated, UserRead
from users_api.services import user_service

router = APIRouter()


def _not_found(user_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User {user_id} not found.",
    )


@router.post(
    "",
    response_model=UserCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
def insert(
    body: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    """
    Salt and hash the password, force permissionLevel to 1, store the record.

    The body is passed through as-is; there is no validation step.
    """
    user = user_service.insert(db, body)
    return {"id": user.id}


@router.get(
    "",
    response_model=list[UserRead],
    summary="List users",
)
def list_users(
    limit: int = Query(settings.default_page_size, ge=1),
    page: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    limit = min(limit, settings.max_page_size)
    return user_repo.list_users(db, limit, page)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get a user by id",
)
def get_by_id(user_id: int, db: Session = Depends(get_db)):
    user = user_repo.find_by_id(db, user_id)
    if user is None:
        raise _not_found(user_id)
    return user


@router.patch(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a user",
)
def patch_by_id(
    user_id: int,
    body: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    """
    Partial update. A new password is salted and hashed like on registration.
    """
    if user_service.patch(db, user_id, body) is None:
        raise _not_found(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
def remove_by_id(user_id: int, db: Session = Depends(get_db)):
    if not user_repo.remove_by_id(db, user_id):
        raise _not_found(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
