"""Routes for the signed-in user, whatever their role."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Request

from course_admin.api.dependencies import get_current_user
from course_admin.core.responses import success
from course_admin.schemas.envelope import SuccessResponse
from course_admin.schemas.user import User

router = APIRouter(prefix="/users", tags=["account"], dependencies=[Depends(get_current_user)])


@router.get("/me", response_model=SuccessResponse[User])
def current_user_endpoint(request: Request):
    """Return the principal resolved for this request."""
    return success("Current user fetched", request.state.principal)
