"""Service helpers for article API operations."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy.orm import Session

from course_admin.core.errors import NotFoundError
from course_admin.db.models.article import Article
from course_admin.db.repository.articles import ARTICLE_FILTERS
from course_admin.db.repository.articles import ARTICLE_ORDER
from course_admin.db.repository.articles import create_article
from course_admin.db.repository.articles import delete_article
from course_admin.db.repository.articles import get_article
from course_admin.db.repository.articles import list_articles
from course_admin.db.repository.articles import update_article
from course_admin.schemas.article import ArticleCreate
from course_admin.schemas.article import ArticleUpdate
from course_admin.services.changes import collect_changes
from course_admin.services.integrity import guarded_delete
from course_admin.services.listing import build_query_spec
from course_admin.services.listing import list_payload


def list_articles_service(
    session: Session,
    *,
    page_num: str | None,
    page_size: str | None,
    filters: Mapping[str, str | None],
):
    """Page through articles with optional title search."""
    spec = build_query_spec(
        page_num=page_num,
        page_size=page_size,
        filters=filters,
        fields=ARTICLE_FILTERS,
        order_by=ARTICLE_ORDER,
    )
    total, rows = list_articles(session, spec)
    return list_payload(spec, total, rows)


def get_article_service(session: Session, article_id: int):
    """Fetch an article or raise not found."""
    article = get_article(session, article_id)
    if article is None:
        raise NotFoundError(message=f"Article id: {article_id} not found")
    return article


def create_article_service(session: Session, payload: ArticleCreate):
    """Create and persist a new article."""
    article = create_article(session, title=payload.title, content=payload.content)
    session.commit()
    return article


def update_article_service(session: Session, article_id: int, payload: ArticleUpdate):
    """Update mutable article fields for an existing article."""
    article = get_article_service(session, article_id)
    article = update_article(session, article, collect_changes(payload, Article))
    session.commit()
    return article


def delete_article_service(session: Session, article_id: int) -> None:
    """Delete an article."""
    article = get_article_service(session, article_id)
    guarded_delete(session, article, delete_article)
