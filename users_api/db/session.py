# File: users_api/db/session.py

"""
Engine and session factory for the users database.

DATABASE_URL picks the backend: PostgreSQL (psycopg) by default,
sqlite for local runs and tests.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from users_api.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

# sqlite connections are handed between FastAPI's worker threads
_connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=_connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
