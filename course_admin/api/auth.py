"""Administrator sign-in route."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from sqlalchemy.orm import Session

from course_admin.core.config import Settings
from course_admin.core.config import get_settings
from course_admin.core.responses import success
from course_admin.db.base import get_db_session
from course_admin.schemas.auth import SignInRequest
from course_admin.schemas.auth import SignInResult
from course_admin.schemas.envelope import SuccessResponse
from course_admin.services.auth import sign_in_service

router = APIRouter(prefix="/admin/auth", tags=["auth"])


@router.post("/sign_in", response_model=SuccessResponse[SignInResult])
def sign_in_endpoint(
    payload: SignInRequest,
    session: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Exchange administrator credentials for a signed token."""
    token = sign_in_service(session, settings, payload)
    return success("Signed in", {"token": token})
