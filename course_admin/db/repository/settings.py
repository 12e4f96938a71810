"""Repository primitives for the settings singleton."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from course_admin.db.models.setting import Setting


def get_setting(session: Session) -> Setting | None:
    """Fetch the single settings row."""
    stmt = select(Setting).order_by(Setting.id.asc()).limit(1)
    return session.scalars(stmt).first()


def update_setting(session: Session, setting: Setting, changes: Mapping[str, Any]) -> Setting:
    """Apply validated field changes; keys are model attribute names."""
    for key, value in changes.items():
        setattr(setting, key, value)
    session.flush()
    session.refresh(setting)
    return setting
