"""Chapter admin routes."""

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
from course_admin.schemas.chapter import Chapter
from course_admin.schemas.chapter import ChapterCreate
from course_admin.schemas.chapter import ChapterUpdate
from course_admin.schemas.common import ListData
from course_admin.schemas.envelope import SuccessResponse
from course_admin.services.chapters import create_chapter_service
from course_admin.services.chapters import delete_chapter_service
from course_admin.services.chapters import get_chapter_service
from course_admin.services.chapters import list_chapters_service
from course_admin.services.chapters import update_chapter_service

router = APIRouter(prefix="/admin/chapters", tags=["chapters"], dependencies=[Depends(get_current_admin)])


@router.get("", response_model=SuccessResponse[ListData[Chapter]])
def list_chapters_endpoint(
    page: PageParams = Depends(get_page_params),
    course_id: str | None = Query(default=None, alias="courseId"),
    title: str | None = Query(default=None),
    session: Session = Depends(get_db_session),
):
    """List the chapters of a course; ``courseId`` is mandatory."""
    data = list_chapters_service(
        session,
        page_num=page.page_num,
        page_size=page.page_size,
        filters={"courseId": course_id, "title": title},
    )
    return success("Chapters fetched", data)


@router.get("/{chapter_id}", response_model=SuccessResponse[Chapter])
def get_chapter_endpoint(chapter_id: EntityId, session: Session = Depends(get_db_session)):
    return success("Chapter fetched", get_chapter_service(session, chapter_id))


@router.post("", response_model=SuccessResponse[Chapter], status_code=201)
def create_chapter_endpoint(payload: ChapterCreate, session: Session = Depends(get_db_session)):
    return success("Chapter created", create_chapter_service(session, payload))


@router.put("/{chapter_id}", response_model=SuccessResponse[Chapter])
def update_chapter_endpoint(
    chapter_id: EntityId,
    payload: ChapterUpdate,
    session: Session = Depends(get_db_session),
):
    return success("Chapter updated", update_chapter_service(session, chapter_id, payload))


@router.delete("/{chapter_id}", response_model=SuccessResponse[None])
def delete_chapter_endpoint(chapter_id: EntityId, session: Session = Depends(get_db_session)):
    delete_chapter_service(session, chapter_id)
    return success("Chapter deleted")
