"""Course admin routes."""

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
from course_admin.db.models.user import User
from course_admin.schemas.common import ListData
from course_admin.schemas.course import Course
from course_admin.schemas.course import CourseCreate
from course_admin.schemas.course import CourseUpdate
from course_admin.schemas.envelope import SuccessResponse
from course_admin.services.courses import create_course_service
from course_admin.services.courses import delete_course_service
from course_admin.services.courses import get_course_service
from course_admin.services.courses import list_courses_service
from course_admin.services.courses import update_course_service

router = APIRouter(prefix="/admin/courses", tags=["courses"], dependencies=[Depends(get_current_admin)])


@router.get("", response_model=SuccessResponse[ListData[Course]])
def list_courses_endpoint(
    page: PageParams = Depends(get_page_params),
    category_id: str | None = Query(default=None, alias="categoryId"),
    user_id: str | None = Query(default=None, alias="userId"),
    name: str | None = Query(default=None),
    recommended: str | None = Query(default=None),
    introductory: str | None = Query(default=None),
    session: Session = Depends(get_db_session),
):
    """List courses with any combination of category, author, name and flags."""
    data = list_courses_service(
        session,
        page_num=page.page_num,
        page_size=page.page_size,
        filters={
            "categoryId": category_id,
            "userId": user_id,
            "name": name,
            "recommended": recommended,
            "introductory": introductory,
        },
    )
    return success("Courses fetched", data)


@router.get("/{course_id}", response_model=SuccessResponse[Course])
def get_course_endpoint(course_id: EntityId, session: Session = Depends(get_db_session)):
    return success("Course fetched", get_course_service(session, course_id))


@router.post("", response_model=SuccessResponse[Course], status_code=201)
def create_course_endpoint(
    payload: CourseCreate,
    admin: User = Depends(get_current_admin),
    session: Session = Depends(get_db_session),
):
    return success("Course created", create_course_service(session, payload, author=admin))


@router.put("/{course_id}", response_model=SuccessResponse[Course])
def update_course_endpoint(
    course_id: EntityId,
    payload: CourseUpdate,
    session: Session = Depends(get_db_session),
):
    return success("Course updated", update_course_service(session, course_id, payload))


@router.delete("/{course_id}", response_model=SuccessResponse[None])
def delete_course_endpoint(course_id: EntityId, session: Session = Depends(get_db_session)):
    """Delete a course; refused with 409 while chapters reference it."""
    delete_course_service(session, course_id)
    return success("Course deleted")
