"""Pydantic schemas for chapter API payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from course_admin.db.query import INT32_MAX
from course_admin.schemas.common import CamelModel
from course_admin.schemas.course import CourseBrief


class ChapterCreate(CamelModel):
    """Payload to create a chapter inside a course."""

    course_id: int = Field(ge=1, le=INT32_MAX)
    title: str = Field(min_length=1)
    content: str | None = None
    video: str | None = None
    rank: int = Field(default=1, ge=1, le=INT32_MAX)


class ChapterUpdate(CamelModel):
    """Mutable chapter fields."""

    course_id: int | None = Field(default=None, ge=1, le=INT32_MAX)
    title: str | None = Field(default=None, min_length=1)
    content: str | None = None
    video: str | None = None
    rank: int | None = Field(default=None, ge=1, le=INT32_MAX)


class Chapter(CamelModel):
    id: int
    course_id: int
    title: str
    content: str | None = None
    video: str | None = None
    rank: int
    created_at: datetime
    updated_at: datetime
    course: CourseBrief | None = None
