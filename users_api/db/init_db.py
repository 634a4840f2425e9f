"""
Database initialization helpers.

We only wire up the metadata here. Models are imported so their
tables get registered on Base.metadata.
"""

from typing import Optional

from sqlalchemy.engine import Engine

from users_api.db.session import engine
from users_api.models.base import Base

from users_api.models import user  # noqa: F401


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=bind or engine)
