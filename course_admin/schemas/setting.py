"""Pydantic schemas for the settings singleton."""

from __future__ import annotations

from datetime import datetime

from course_admin.schemas.common import CamelModel


class SettingUpdate(CamelModel):
    name: str | None = None
    icp: str | None = None
    copyright: str | None = None


class Setting(CamelModel):
    id: int
    name: str | None = None
    icp: str | None = None
    copyright: str | None = None
    created_at: datetime
    updated_at: datetime
