"""Repository primitives for course entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import func
from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm import joinedload

from course_admin.db.models.course import Course
from course_admin.db.query import FilterField
from course_admin.db.query import MatchMode
from course_admin.db.query import QuerySpec
from course_admin.db.query import fetch_page
from course_admin.db.query import to_bool
from course_admin.db.query import to_int

COURSE_FILTERS = (
    FilterField("categoryId", Course.category_id, MatchMode.EXACT, to_int),
    FilterField("userId", Course.user_id, MatchMode.EXACT, to_int),
    FilterField("name", Course.name, MatchMode.CONTAINS),
    FilterField("recommended", Course.recommended, MatchMode.EXACT, to_bool),
    FilterField("introductory", Course.introductory, MatchMode.EXACT, to_bool),
)
COURSE_ORDER = (Course.id.asc(),)
COURSE_PARENTS = (joinedload(Course.category), joinedload(Course.user))


def create_course(
    session: Session,
    *,
    category_id: int,
    user_id: int,
    name: str,
    image: str | None = None,
    recommended: bool = False,
    introductory: bool = False,
    content: str | None = None,
) -> Course:
    """Create and return a course row."""
    course = Course(
        category_id=category_id,
        user_id=user_id,
        name=name,
        image=image,
        recommended=recommended,
        introductory=introductory,
        content=content,
    )
    session.add(course)
    session.flush()
    session.refresh(course)
    return course


def get_course(session: Session, course_id: int, *, for_update: bool = False) -> Course | None:
    """Fetch a course by id with its category and author loaded."""
    if for_update:
        return session.get(Course, course_id, with_for_update=True)
    return session.get(Course, course_id, options=COURSE_PARENTS)


def list_courses(session: Session, spec: QuerySpec) -> tuple[int, list[Course]]:
    """Count and page courses matching a query spec."""
    return fetch_page(session, Course, spec, options=COURSE_PARENTS)


def count_courses_in_category(session: Session, category_id: int) -> int:
    stmt = select(func.count()).select_from(Course).where(Course.category_id == category_id)
    return session.scalar(stmt) or 0


def count_courses_by_user(session: Session, user_id: int) -> int:
    stmt = select(func.count()).select_from(Course).where(Course.user_id == user_id)
    return session.scalar(stmt) or 0


def update_course(session: Session, course: Course, changes: Mapping[str, Any]) -> Course:
    """Apply validated field changes; keys are model attribute names."""
    for key, value in changes.items():
        setattr(course, key, value)
    session.flush()
    session.refresh(course)
    return course


def delete_course(session: Session, course: Course) -> None:
    session.delete(course)
    session.flush()
