"""Pydantic schemas for course API payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from course_admin.db.query import INT32_MAX
from course_admin.schemas.category import CategoryBrief
from course_admin.schemas.common import CamelModel
from course_admin.schemas.user import UserBrief


class CourseCreate(CamelModel):
    """Payload to create a course; the author defaults to the acting admin."""

    category_id: int = Field(ge=1, le=INT32_MAX)
    user_id: int | None = Field(default=None, ge=1, le=INT32_MAX)
    name: str = Field(min_length=1)
    image: str | None = None
    recommended: bool = False
    introductory: bool = False
    content: str | None = None


class CourseUpdate(CamelModel):
    """Mutable course fields."""

    category_id: int | None = Field(default=None, ge=1, le=INT32_MAX)
    user_id: int | None = Field(default=None, ge=1, le=INT32_MAX)
    name: str | None = Field(default=None, min_length=1)
    image: str | None = None
    recommended: bool | None = None
    introductory: bool | None = None
    content: str | None = None


class Course(CamelModel):
    id: int
    category_id: int
    user_id: int
    name: str
    image: str | None = None
    recommended: bool
    introductory: bool
    content: str | None = None
    chapters_count: int
    created_at: datetime
    updated_at: datetime
    category: CategoryBrief | None = None
    user: UserBrief | None = None


class CourseBrief(CamelModel):
    id: int
    name: str
