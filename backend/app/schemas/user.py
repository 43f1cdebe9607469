"""User request/response schemas."""
from datetime import datetime
from typing import Optional
from app.schemas.base import CamelModel, CamelORMModel


class UserCreate(CamelModel):
    username: str
    email: str


class UserResponse(CamelORMModel):
    id: int
    username: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserCreatedResponse(CamelModel):
    message: str
    user: UserResponse
