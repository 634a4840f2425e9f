# File: users_api/schemas/user.py

from typing import Optional

from pydantic import BaseModel


class UserCreated(BaseModel):
    id: int


class UserRead(BaseModel):
    id: int
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    permissionLevel: Optional[int] = None

    class Config:
        from_attributes = True  # Pydantic v2: replaces orm_mode
