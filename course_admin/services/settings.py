"""Service helpers for the settings singleton."""

from __future__ import annotations

from sqlalchemy.orm import Session

from course_admin.core.errors import NotFoundError
from course_admin.db.models.setting import Setting
from course_admin.db.repository.settings import get_setting
from course_admin.db.repository.settings import update_setting
from course_admin.schemas.setting import SettingUpdate
from course_admin.services.changes import collect_changes


def get_setting_service(session: Session):
    """Fetch the settings row; its absence means seeding was never run."""
    setting = get_setting(session)
    if setting is None:
        raise NotFoundError(message="Initial settings not found, run the seeders first")
    return setting


def update_setting_service(session: Session, payload: SettingUpdate):
    setting = get_setting_service(session)
    setting = update_setting(session, setting, collect_changes(payload, Setting))
    session.commit()
    return setting
