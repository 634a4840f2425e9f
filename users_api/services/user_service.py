# File: users_api/services/user_service.py

"""
Users service.

Turns incoming request bodies into stored records:
  - the plaintext password is replaced by "<salt>$<hash>"
  - self-registered users always get permissionLevel 1
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from users_api.core.security import hash_password
from users_api.models.user import User
from users_api.repositories import user_repo

logger = logging.getLogger(__name__)

DEFAULT_PERMISSION_LEVEL = 1


def insert(db: Session, body: Dict[str, Any]) -> User:
    """
    Register a user from a request body.

    No checks are made on the body: a missing or non-string password
    raises here and is left to propagate.
    """
    record = dict(body)
    record["password"] = hash_password(record["password"])
    record["permissionLevel"] = DEFAULT_PERMISSION_LEVEL

    user = user_repo.create_user(db, record)
    logger.info("Registered user %s", user.id)
    return user


def patch(db: Session, user_id: int, body: Dict[str, Any]) -> Optional[User]:
    """
    Partial update of a stored user.

    permissionLevel is not writable here; records keep the level they
    were registered with.
    """
    fields = dict(body)
    fields.pop("permissionLevel", None)
    if fields.get("password") is not None:
        fields["password"] = hash_password(fields["password"])

    user = user_repo.patch_user(db, user_id, fields)
    if user is not None:
        logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(fields)) or "no fields")
    return user
