"""Service helpers for course API operations."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_admin.core.errors import BadRequestError
from course_admin.core.errors import NotFoundError
from course_admin.db.models.course import Course
from course_admin.db.models.user import User
from course_admin.db.repository.categories import get_category
from course_admin.db.repository.courses import COURSE_FILTERS
from course_admin.db.repository.courses import COURSE_ORDER
from course_admin.db.repository.courses import create_course
from course_admin.db.repository.courses import delete_course
from course_admin.db.repository.courses import get_course
from course_admin.db.repository.courses import list_courses
from course_admin.db.repository.courses import update_course
from course_admin.db.repository.users import get_user
from course_admin.schemas.course import CourseCreate
from course_admin.schemas.course import CourseUpdate
from course_admin.services.changes import collect_changes
from course_admin.services.integrity import guarded_delete
from course_admin.services.listing import build_query_spec
from course_admin.services.listing import list_payload


def _ensure_category_exists(session: Session, category_id: int) -> None:
    if get_category(session, category_id) is None:
        raise NotFoundError(message=f"Category id: {category_id} not found")


def _ensure_user_exists(session: Session, user_id: int) -> None:
    if get_user(session, user_id) is None:
        raise NotFoundError(message=f"User id: {user_id} not found")


def list_courses_service(
    session: Session,
    *,
    page_num: str | None,
    page_size: str | None,
    filters: Mapping[str, str | None],
):
    """Page through courses with category and author attached."""
    spec = build_query_spec(
        page_num=page_num,
        page_size=page_size,
        filters=filters,
        fields=COURSE_FILTERS,
        order_by=COURSE_ORDER,
    )
    total, rows = list_courses(session, spec)
    return list_payload(spec, total, rows)


def get_course_service(session: Session, course_id: int, *, for_update: bool = False):
    """Fetch a course or raise not found."""
    course = get_course(session, course_id, for_update=for_update)
    if course is None:
        raise NotFoundError(message=f"Course id: {course_id} not found")
    return course


def create_course_service(session: Session, payload: CourseCreate, *, author: User):
    """Create a course; without an explicit author the acting admin owns it."""
    user_id = payload.user_id if payload.user_id is not None else author.id
    _ensure_category_exists(session, payload.category_id)
    _ensure_user_exists(session, user_id)
    try:
        course = create_course(
            session,
            category_id=payload.category_id,
            user_id=user_id,
            name=payload.name,
            image=payload.image,
            recommended=payload.recommended,
            introductory=payload.introductory,
            content=payload.content,
        )
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise BadRequestError(message="Course payload violates schema constraints") from exc
    return get_course_service(session, course.id)


def update_course_service(session: Session, course_id: int, payload: CourseUpdate):
    """Update mutable course fields for an existing course."""
    course = get_course_service(session, course_id)
    changes = collect_changes(payload, Course)
    if "category_id" in changes:
        _ensure_category_exists(session, changes["category_id"])
    if "user_id" in changes:
        _ensure_user_exists(session, changes["user_id"])
    try:
        course = update_course(session, course, changes)
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise BadRequestError(message="Course payload violates schema constraints") from exc
    return course


def delete_course_service(session: Session, course_id: int) -> None:
    """Delete a course unless chapters still belong to it."""
    course = get_course_service(session, course_id, for_update=True)
    guarded_delete(session, course, delete_course)
