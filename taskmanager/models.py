# taskmanager/models.py
"""User and Task tables plus the request/response schemas of the API."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


USERNAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
TITLE_MAX_LENGTH = 200


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes read back from SQLite."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class User(SQLModel, table=True):
    """Registered account. The password hash never leaves the server."""

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=USERNAME_MAX_LENGTH, unique=True, index=True)
    email: str = Field(max_length=EMAIL_MAX_LENGTH, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))


class Task(SQLModel, table=True):
    """Task owned by exactly one user."""

    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: str = Field(default="")
    is_completed: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))


class CamelModel(BaseModel):
    """Schema base that reads and writes lowerCamelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(CamelModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class RegisterResponse(CamelModel):
    message: str
    user_id: int


class LoginResponse(CamelModel):
    token: str
    user_id: int
    username: str
    email: str


class TaskCreate(CamelModel):
    """Body of POST /api/tasks. Any other keys the client sends are ignored."""

    title: Optional[str] = None
    description: Optional[str] = None


class TaskUpdate(CamelModel):
    """Body of PUT /api/tasks/{id}. Replaces title, description and completion."""

    title: Optional[str] = None
    description: Optional[str] = None
    is_completed: bool = False


class TaskRead(CamelModel):
    """Task as returned to clients."""

    id: int
    user_id: int
    title: str
    description: str
    is_completed: bool
    created_at: datetime
    completed_at: Optional[datetime] = None

    @field_serializer("created_at", "completed_at")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        value = as_utc(value)
        if value is None:
            return None
        return value.isoformat().replace("+00:00", "Z")
