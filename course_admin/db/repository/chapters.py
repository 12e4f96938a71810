"""Repository primitives for chapter entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import func
from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm import joinedload

from course_admin.db.models.chapter import Chapter
from course_admin.db.models.course import Course
from course_admin.db.query import FilterField
from course_admin.db.query import MatchMode
from course_admin.db.query import QuerySpec
from course_admin.db.query import fetch_page
from course_admin.db.query import to_int

CHAPTER_FILTERS = (
    FilterField("courseId", Chapter.course_id, MatchMode.EXACT, to_int),
    FilterField("title", Chapter.title, MatchMode.CONTAINS),
)
CHAPTER_ORDER = (Chapter.id.asc(),)
CHAPTER_PARENTS = (joinedload(Chapter.course),)


def create_chapter(
    session: Session,
    *,
    course_id: int,
    title: str,
    content: str | None = None,
    video: str | None = None,
    rank: int = 1,
) -> Chapter:
    """Create and return a chapter row."""
    chapter = Chapter(course_id=course_id, title=title, content=content, video=video, rank=rank)
    session.add(chapter)
    session.flush()
    sync_chapters_count(session, course_id)
    session.refresh(chapter)
    return chapter


def get_chapter(session: Session, chapter_id: int) -> Chapter | None:
    """Fetch a chapter by id with its course loaded."""
    return session.get(Chapter, chapter_id, options=CHAPTER_PARENTS)


def list_chapters(session: Session, spec: QuerySpec) -> tuple[int, list[Chapter]]:
    """Count and page chapters matching a query spec."""
    return fetch_page(session, Chapter, spec, options=CHAPTER_PARENTS)


def count_chapters_in_course(session: Session, course_id: int) -> int:
    stmt = select(func.count()).select_from(Chapter).where(Chapter.course_id == course_id)
    return session.scalar(stmt) or 0


def sync_chapters_count(session: Session, course_id: int) -> None:
    """Store the current chapter count on the owning course."""
    course = session.get(Course, course_id)
    if course is not None:
        course.chapters_count = count_chapters_in_course(session, course_id)
        session.flush()


def update_chapter(session: Session, chapter: Chapter, changes: Mapping[str, Any]) -> Chapter:
    """Apply validated field changes; keys are model attribute names."""
    previous_course_id = chapter.course_id
    for key, value in changes.items():
        setattr(chapter, key, value)
    session.flush()
    if chapter.course_id != previous_course_id:
        sync_chapters_count(session, previous_course_id)
        sync_chapters_count(session, chapter.course_id)
    session.refresh(chapter)
    return chapter


def delete_chapter(session: Session, chapter: Chapter) -> None:
    course_id = chapter.course_id
    session.delete(chapter)
    session.flush()
    sync_chapters_count(session, course_id)
