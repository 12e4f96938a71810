"""Article admin routes."""

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
from course_admin.schemas.article import Article
from course_admin.schemas.article import ArticleCreate
from course_admin.schemas.article import ArticleUpdate
from course_admin.schemas.common import ListData
from course_admin.schemas.envelope import SuccessResponse
from course_admin.services.articles import create_article_service
from course_admin.services.articles import delete_article_service
from course_admin.services.articles import get_article_service
from course_admin.services.articles import list_articles_service
from course_admin.services.articles import update_article_service

router = APIRouter(prefix="/admin/articles", tags=["articles"], dependencies=[Depends(get_current_admin)])


@router.get("", response_model=SuccessResponse[ListData[Article]])
def list_articles_endpoint(
    page: PageParams = Depends(get_page_params),
    title: str | None = Query(default=None),
    session: Session = Depends(get_db_session),
):
    """List articles, optionally searching titles."""
    data = list_articles_service(
        session,
        page_num=page.page_num,
        page_size=page.page_size,
        filters={"title": title},
    )
    return success("Articles fetched", data)


@router.get("/{article_id}", response_model=SuccessResponse[Article])
def get_article_endpoint(article_id: EntityId, session: Session = Depends(get_db_session)):
    return success("Article fetched", get_article_service(session, article_id))


@router.post("", response_model=SuccessResponse[Article], status_code=201)
def create_article_endpoint(payload: ArticleCreate, session: Session = Depends(get_db_session)):
    return success("Article created", create_article_service(session, payload))


@router.put("/{article_id}", response_model=SuccessResponse[Article])
def update_article_endpoint(
    article_id: EntityId,
    payload: ArticleUpdate,
    session: Session = Depends(get_db_session),
):
    return success("Article updated", update_article_service(session, article_id, payload))


@router.delete("/{article_id}", response_model=SuccessResponse[None])
def delete_article_endpoint(article_id: EntityId, session: Session = Depends(get_db_session)):
    delete_article_service(session, article_id)
    return success("Article deleted")
