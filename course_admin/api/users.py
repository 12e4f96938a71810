"""User admin routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query
from sqlalchemy.orm import Session

from course_admin.api.dependencies import EntityId
from course_admin.api.dependencies import PageParams
from course_admin.api.dependencies import get_current_admin
from course_admin.api.dependencies import get_page_params
from course_admin.core.responses import success
from course_admin.db.base import get_db_session
from course_admin.schemas.common import ListData
from course_admin.schemas.envelope import SuccessResponse
from course_admin.schemas.user import User
from course_admin.schemas.user import UserCreate
from course_admin.schemas.user import UserUpdate
from course_admin.services.users import create_user_service
from course_admin.services.users import delete_user_service
from course_admin.services.users import get_user_service
from course_admin.services.users import list_users_service
from course_admin.services.users import update_user_service

router = APIRouter(prefix="/admin/users", tags=["users"], dependencies=[Depends(get_current_admin)])


@router.get("", response_model=SuccessResponse[ListData[User]])
def list_users_endpoint(
    page: PageParams = Depends(get_page_params),
    email: str | None = Query(default=None),
    username: str | None = Query(default=None),
    nickname: str | None = Query(default=None),
    role: str | None = Query(default=None),
    session: Session = Depends(get_db_session),
):
    """List users by exact email/username/role or nickname search."""
    data = list_users_service(
        session,
        page_num=page.page_num,
        page_size=page.page_size,
        filters={"email": email, "username": username, "nickname": nickname, "role": role},
    )
    return success("Users fetched", data)


@router.get("/{user_id}", response_model=SuccessResponse[User])
def get_user_endpoint(user_id: EntityId, session: Session = Depends(get_db_session)):
    return success("User fetched", get_user_service(session, user_id))


@router.post("", response_model=SuccessResponse[User], status_code=201)
def create_user_endpoint(payload: UserCreate, session: Session = Depends(get_db_session)):
    return success("User created", create_user_service(session, payload))


@router.put("/{user_id}", response_model=SuccessResponse[User])
def update_user_endpoint(
    user_id: EntityId,
    payload: UserUpdate,
    session: Session = Depends(get_db_session),
):
    return success("User updated", update_user_service(session, user_id, payload))


@router.delete("/{user_id}", response_model=SuccessResponse[None])
def delete_user_endpoint(user_id: EntityId, session: Session = Depends(get_db_session)):
    delete_user_service(session, user_id)
    return success("User deleted")
