"""Repository primitives for article entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from course_admin.db.models.article import Article
from course_admin.db.query import FilterField
from course_admin.db.query import MatchMode
from course_admin.db.query import QuerySpec
from course_admin.db.query import fetch_page

ARTICLE_FILTERS = (FilterField("title", Article.title, MatchMode.CONTAINS),)
ARTICLE_ORDER = (Article.id.asc(),)


def create_article(session: Session, *, title: str, content: str) -> Article:
    """Create and return an article row."""
    article = Article(title=title, content=content)
    session.add(article)
    session.flush()
    session.refresh(article)
    return article


def get_article(session: Session, article_id: int) -> Article | None:
    """Fetch an article by id."""
    return session.get(Article, article_id)


def list_articles(session: Session, spec: QuerySpec) -> tuple[int, list[Article]]:
    """Count and page articles matching a query spec."""
    return fetch_page(session, Article, spec)


def update_article(session: Session, article: Article, changes: Mapping[str, Any]) -> Article:
    """Apply validated field changes; keys are model attribute names."""
    for key, value in changes.items():
        setattr(article, key, value)
    session.flush()
    session.refresh(article)
    return article


def delete_article(session: Session, article: Article) -> None:
    session.delete(article)
    session.flush()
