# File: users_api/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; init_db() creates every table registered on its metadata."""
