# File: socialweb/services/user_service.py

"""
User persistence.

Explicit read/write operations for the users table. Routes call these
instead of touching the session directly.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from socialweb.core.exceptions import PersistenceError, UserNotFoundError
from socialweb.models.user import User
from socialweb.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def create_user(db: Session, *, payload: UserCreate) -> User:
    """
    Insert a new user and return it with its generated id.

    Fields are stored exactly as received. Raises PersistenceError if
    the commit fails; the session is rolled back first.
    """
    user = User(
        user_name=payload.user_name,
        display_name=payload.display_name,
        password=payload.password,
    )
    db.add(user)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to save user %r", payload.user_name)
        raise PersistenceError("Could not save user.") from exc

    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_or_raise(db: Session, user_id: int) -> User:
    user = get_user(db, user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
