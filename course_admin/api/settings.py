"""Settings singleton admin routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from sqlalchemy.orm import Session

from course_admin.api.dependencies import get_current_admin
from course_admin.core.responses import success
from course_admin.db.base import get_db_session
from course_admin.schemas.envelope import SuccessResponse
from course_admin.schemas.setting import Setting
from course_admin.schemas.setting import SettingUpdate
from course_admin.services.settings import get_setting_service
from course_admin.services.settings import update_setting_service

router = APIRouter(prefix="/admin/settings", tags=["settings"], dependencies=[Depends(get_current_admin)])


@router.get("", response_model=SuccessResponse[Setting])
def get_setting_endpoint(session: Session = Depends(get_db_session)):
    return success("Settings fetched", get_setting_service(session))


@router.put("", response_model=SuccessResponse[Setting])
def update_setting_endpoint(payload: SettingUpdate, session: Session = Depends(get_db_session)):
    return success("Settings updated", update_setting_service(session, payload))
