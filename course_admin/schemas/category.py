"""Pydantic schemas for category API payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from course_admin.db.query import INT32_MAX
from course_admin.schemas.common import CamelModel


class CategoryCreate(CamelModel):
    """Payload to create a category."""

    name: str = Field(min_length=1)
    rank: int = Field(ge=1, le=INT32_MAX)


class CategoryUpdate(CamelModel):
    """Mutable category fields."""

    name: str | None = Field(default=None, min_length=1)
    rank: int | None = Field(default=None, ge=1, le=INT32_MAX)


class Category(CamelModel):
    id: int
    name: str
    rank: int
    created_at: datetime
    updated_at: datetime


class CategoryBrief(CamelModel):
    id: int
    name: str
