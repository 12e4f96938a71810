"""Pre-delete guard against orphaning dependent rows.

The parent is expected to be loaded ``FOR UPDATE`` in the current
transaction so that, on PostgreSQL, no child referencing it can be
inserted between the count and the delete. The ``ON DELETE RESTRICT``
foreign keys remain the final authority; a constraint failure on flush is
reported as the same conflict.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_admin.core.errors import ConflictError
from course_admin.db.models.category import Category
from course_admin.db.models.course import Course
from course_admin.db.models.user import User
from course_admin.db.repository.chapters import count_chapters_in_course
from course_admin.db.repository.courses import count_courses_by_user
from course_admin.db.repository.courses import count_courses_in_category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependentCheck:
    """Counts children of one kind that reference a parent id."""

    count: Callable[[Session, int], int]
    message: str


DEPENDENT_CHECKS: dict[type[Any], tuple[DependentCheck, ...]] = {
    Category: (DependentCheck(count_courses_in_category, "Category has courses and cannot be deleted"),),
    Course: (DependentCheck(count_chapters_in_course, "Course has chapters and cannot be deleted"),),
    User: (DependentCheck(count_courses_by_user, "User has authored courses and cannot be deleted"),),
}


def ensure_no_dependents(session: Session, entity: Any) -> None:
    """Raise a conflict if any registered child still references ``entity``."""
    for check in DEPENDENT_CHECKS.get(type(entity), ()):
        if check.count(session, entity.id) > 0:
            raise ConflictError(message=check.message)


def guarded_delete(
    session: Session,
    entity: Any,
    delete: Callable[[Session, Any], None],
) -> None:
    """Check dependents, delete and commit as one transaction."""
    entity_name = type(entity).__name__
    entity_id = entity.id
    try:
        ensure_no_dependents(session, entity)
        delete(session, entity)
        session.commit()
    except ConflictError:
        session.rollback()
        logger.info("Delete blocked by dependents entity=%s id=%s", entity_name, entity_id)
        raise
    except IntegrityError as exc:
        session.rollback()
        logger.warning("Delete rejected by constraint entity=%s id=%s", entity_name, entity_id)
        raise ConflictError(message=f"{entity_name} is still referenced and cannot be deleted") from exc

    logger.info("Deleted entity=%s id=%s", entity_name, entity_id)
