"""Repository primitives for category entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from course_admin.db.models.category import Category
from course_admin.db.query import FilterField
from course_admin.db.query import MatchMode
from course_admin.db.query import QuerySpec
from course_admin.db.query import fetch_page
from course_admin.db.query import to_int

CATEGORY_FILTERS = (
    FilterField("name", Category.name, MatchMode.CONTAINS),
    FilterField("rank", Category.rank, MatchMode.EXACT, to_int),
)
CATEGORY_ORDER = (Category.rank.asc(), Category.id.asc())


def create_category(session: Session, *, name: str, rank: int) -> Category:
    """Create and return a category row."""
    category = Category(name=name, rank=rank)
    session.add(category)
    session.flush()
    session.refresh(category)
    return category


def get_category(session: Session, category_id: int, *, for_update: bool = False) -> Category | None:
    """Fetch a category by id, optionally row-locking it for the transaction."""
    return session.get(Category, category_id, with_for_update=True if for_update else None)


def list_categories(session: Session, spec: QuerySpec) -> tuple[int, list[Category]]:
    """Count and page categories matching a query spec."""
    return fetch_page(session, Category, spec)


def update_category(session: Session, category: Category, changes: Mapping[str, Any]) -> Category:
    """Apply validated field changes; keys are model attribute names."""
    for key, value in changes.items():
        setattr(category, key, value)
    session.flush()
    session.refresh(category)
    return category


def delete_category(session: Session, category: Category) -> None:
    session.delete(category)
    session.flush()
