# File: users_api/models/user.py

"""
User model.

Column names follow the JSON field names used on the wire
(firstName, lastName, permissionLevel) so records map 1:1 to request bodies.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from users_api.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    firstName: Mapped[str | None] = mapped_column(String(255), nullable=True)
    lastName: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)

    # "<salt>$<hash>", see users_api.core.security
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    permissionLevel: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"


FIELDS = ("firstName", "lastName", "email", "password", "permissionLevel")
