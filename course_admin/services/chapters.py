"""Service helpers for chapter API operations."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_admin.core.errors import BadRequestError
from course_admin.core.errors import NotFoundError
from course_admin.db.models.chapter import Chapter
from course_admin.db.repository.chapters import CHAPTER_FILTERS
from course_admin.db.repository.chapters import CHAPTER_ORDER
from course_admin.db.repository.chapters import create_chapter
from course_admin.db.repository.chapters import delete_chapter
from course_admin.db.repository.chapters import get_chapter
from course_admin.db.repository.chapters import list_chapters
from course_admin.db.repository.chapters import update_chapter
from course_admin.db.repository.courses import get_course
from course_admin.schemas.chapter import ChapterCreate
from course_admin.schemas.chapter import ChapterUpdate
from course_admin.services.changes import collect_changes
from course_admin.services.integrity import guarded_delete
from course_admin.services.listing import build_query_spec
from course_admin.services.listing import list_payload


def _ensure_course_exists(session: Session, course_id: int) -> None:
    if get_course(session, course_id) is None:
        raise NotFoundError(message=f"Course id: {course_id} not found")


def list_chapters_service(
    session: Session,
    *,
    page_num: str | None,
    page_size: str | None,
    filters: Mapping[str, str | None],
):
    """Page through the chapters of one course."""
    if not filters.get("courseId"):
        raise BadRequestError(message="courseId is required to list chapters", field="courseId")
    spec = build_query_spec(
        page_num=page_num,
        page_size=page_size,
        filters=filters,
        fields=CHAPTER_FILTERS,
        order_by=CHAPTER_ORDER,
    )
    total, rows = list_chapters(session, spec)
    return list_payload(spec, total, rows)


def get_chapter_service(session: Session, chapter_id: int):
    """Fetch a chapter or raise not found."""
    chapter = get_chapter(session, chapter_id)
    if chapter is None:
        raise NotFoundError(message=f"Chapter id: {chapter_id} not found")
    return chapter


def create_chapter_service(session: Session, payload: ChapterCreate):
    """Create and persist a chapter under an existing course."""
    _ensure_course_exists(session, payload.course_id)
    try:
        chapter = create_chapter(
            session,
            course_id=payload.course_id,
            title=payload.title,
            content=payload.content,
            video=payload.video,
            rank=payload.rank,
        )
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise BadRequestError(message="Chapter payload violates schema constraints") from exc
    return get_chapter_service(session, chapter.id)


def update_chapter_service(session: Session, chapter_id: int, payload: ChapterUpdate):
    """Update mutable chapter fields for an existing chapter."""
    chapter = get_chapter_service(session, chapter_id)
    changes = collect_changes(payload, Chapter)
    if "course_id" in changes:
        _ensure_course_exists(session, changes["course_id"])
    try:
        chapter = update_chapter(session, chapter, changes)
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise BadRequestError(message="Chapter payload violates schema constraints") from exc
    return chapter


def delete_chapter_service(session: Session, chapter_id: int) -> None:
    """Delete a chapter."""
    chapter = get_chapter_service(session, chapter_id)
    guarded_delete(session, chapter, delete_chapter)
