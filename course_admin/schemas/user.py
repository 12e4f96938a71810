"""Pydantic schemas for user API payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from course_admin.db.models.user import RoleEnum
from course_admin.db.models.user import SexEnum
from course_admin.schemas.common import CamelModel


class UserCreate(CamelModel):
    """Payload to create a user account."""

    email: str = Field(min_length=1, max_length=255)
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=6, max_length=45)
    nickname: str = Field(min_length=1, max_length=255)
    sex: SexEnum = SexEnum.UNSPECIFIED
    company: str | None = None
    introduce: str | None = None
    role: RoleEnum = RoleEnum.USER
    avatar: str | None = None


class UserUpdate(CamelModel):
    """Mutable user fields; anything else in the body is dropped."""

    email: str | None = Field(default=None, min_length=1, max_length=255)
    username: str | None = Field(default=None, min_length=1, max_length=255)
    password: str | None = Field(default=None, min_length=6, max_length=45)
    nickname: str | None = Field(default=None, min_length=1, max_length=255)
    sex: SexEnum | None = None
    company: str | None = None
    introduce: str | None = None
    role: RoleEnum | None = None
    avatar: str | None = None


class User(CamelModel):
    """User response payload; the password hash is never exposed."""

    id: int
    email: str
    username: str
    nickname: str
    sex: int
    company: str | None = None
    introduce: str | None = None
    role: int
    avatar: str | None = None
    created_at: datetime
    updated_at: datetime


class UserBrief(CamelModel):
    id: int
    username: str
    avatar: str | None = None
