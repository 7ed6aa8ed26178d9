# File: socialweb/api/v1/routes_users.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from socialweb.api.deps import get_db
from socialweb.core.exceptions import PersistenceError, UserNotFoundError
from socialweb.schemas.user import UserCreate, UserRead
from socialweb.services import user_service

router = APIRouter()


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_200_OK,
    summary="Register a user",
)
@router.post("/", response_model=UserRead, include_in_schema=False)
def create_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
):
    """
    Store the submitted user and return it with its new id.

    POST /api/1.0/users
    """
    try:
        return user_service.create_user(db, payload=payload)
    except PersistenceError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        )


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get a user by id",
)
def read_user(user_id: int, db: Session = Depends(get_db)):
    try:
        return user_service.get_user_or_raise(db, user_id)
    except UserNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )
