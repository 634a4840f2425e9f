# File: users_api/api/deps.py

from collections.abc import Generator

from sqlalchemy.orm import Session

from users_api.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    One session per request for the users routes.

    Repository functions commit their own writes; the session is only
    closed here. Tests replace this dependency to point at sqlite.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
