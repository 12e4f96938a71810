"""Pydantic schemas for article API payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from course_admin.schemas.common import CamelModel


class ArticleCreate(CamelModel):
    """Payload to create an article."""

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class ArticleUpdate(CamelModel):
    """Mutable article fields."""

    title: str | None = Field(default=None, min_length=1)
    content: str | None = Field(default=None, min_length=1)


class Article(CamelModel):
    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
