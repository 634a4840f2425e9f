# File: users_api/repositories/user_repo.py

"""
User data access.

Keeps the SQLAlchemy calls in one place so routes and services only
deal with plain dicts and User objects. Only the columns declared on
User are stored; any other keys in a record are dropped.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from users_api.models.user import FIELDS, User

logger = logging.getLogger(__name__)


def _known_fields(record: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in record.items() if k in FIELDS}


def _commit(db: Session) -> None:
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def create_user(db: Session, record: Dict[str, Any]) -> User:
    user = User(**_known_fields(record))
    db.add(user)
    _commit(db)
    db.refresh(user)
    return user


def find_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def list_users(db: Session, per_page: int, page: int = 0) -> Sequence[User]:
    stmt = select(User).order_by(User.id).offset(per_page * page).limit(per_page)
    return db.scalars(stmt).all()


def patch_user(db: Session, user_id: int, fields: Dict[str, Any]) -> Optional[User]:
    """
    Partial update. Unknown keys are ignored, None values are written as given.

        patch_user(db, 1, {"email": "new@x.com"})
    """
    user = find_by_id(db, user_id)
    if user is None:
        return None

    for k, v in _known_fields(fields).items():
        setattr(user, k, v)
    _commit(db)
    db.refresh(user)
    return user


def remove_by_id(db: Session, user_id: int) -> bool:
    user = find_by_id(db, user_id)
    if user is None:
        return False
    db.delete(user)
    _commit(db)
    logger.debug("Deleted user row %s", user_id)
    return True
