"""Service helpers for category API operations."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy.orm import Session

from course_admin.core.errors import NotFoundError
from course_admin.db.models.category import Category
from course_admin.db.repository.categories import CATEGORY_FILTERS
from course_admin.db.repository.categories import CATEGORY_ORDER
from course_admin.db.repository.categories import create_category
from course_admin.db.repository.categories import delete_category
from course_admin.db.repository.categories import get_category
from course_admin.db.repository.categories import list_categories
from course_admin.db.repository.categories import update_category
from course_admin.schemas.category import CategoryCreate
from course_admin.schemas.category import CategoryUpdate
from course_admin.services.changes import collect_changes
from course_admin.services.integrity import guarded_delete
from course_admin.services.listing import build_query_spec
from course_admin.services.listing import list_payload


def list_categories_service(
    session: Session,
    *,
    page_num: str | None,
    page_size: str | None,
    filters: Mapping[str, str | None],
):
    """Page through categories ordered by rank."""
    spec = build_query_spec(
        page_num=page_num,
        page_size=page_size,
        filters=filters,
        fields=CATEGORY_FILTERS,
        order_by=CATEGORY_ORDER,
    )
    total, rows = list_categories(session, spec)
    return list_payload(spec, total, rows)


def get_category_service(session: Session, category_id: int, *, for_update: bool = False):
    """Fetch a category or raise not found."""
    category = get_category(session, category_id, for_update=for_update)
    if category is None:
        raise NotFoundError(message=f"Category id: {category_id} not found")
    return category


def create_category_service(session: Session, payload: CategoryCreate):
    """Create and persist a new category."""
    category = create_category(session, name=payload.name, rank=payload.rank)
    session.commit()
    return category


def update_category_service(session: Session, category_id: int, payload: CategoryUpdate):
    """Update mutable category fields for an existing category."""
    category = get_category_service(session, category_id)
    category = update_category(session, category, collect_changes(payload, Category))
    session.commit()
    return category


def delete_category_service(session: Session, category_id: int) -> None:
    """Delete a category unless courses still belong to it."""
    category = get_category_service(session, category_id, for_update=True)
    guarded_delete(session, category, delete_category)
