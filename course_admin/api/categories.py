"""Category admin routes."""

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
from course_admin.schemas.category import Category
from course_admin.schemas.category import CategoryCreate
from course_admin.schemas.category import CategoryUpdate
from course_admin.schemas.common import ListData
from course_admin.schemas.envelope import SuccessResponse
from course_admin.services.categories import create_category_service
from course_admin.services.categories import delete_category_service
from course_admin.services.categories import get_category_service
from course_admin.services.categories import list_categories_service
from course_admin.services.categories import update_category_service

router = APIRouter(prefix="/admin/categories", tags=["categories"], dependencies=[Depends(get_current_admin)])


@router.get("", response_model=SuccessResponse[ListData[Category]])
def list_categories_endpoint(
    page: PageParams = Depends(get_page_params),
    name: str | None = Query(default=None),
    rank: str | None = Query(default=None),
    session: Session = Depends(get_db_session),
):
    """List categories ordered by rank."""
    data = list_categories_service(
        session,
        page_num=page.page_num,
        page_size=page.page_size,
        filters={"name": name, "rank": rank},
    )
    return success("Categories fetched", data)


@router.get("/{category_id}", response_model=SuccessResponse[Category])
def get_category_endpoint(category_id: EntityId, session: Session = Depends(get_db_session)):
    return success("Category fetched", get_category_service(session, category_id))


@router.post("", response_model=SuccessResponse[Category], status_code=201)
def create_category_endpoint(payload: CategoryCreate, session: Session = Depends(get_db_session)):
    return success("Category created", create_category_service(session, payload))


@router.put("/{category_id}", response_model=SuccessResponse[Category])
def update_category_endpoint(
    category_id: EntityId,
    payload: CategoryUpdate,
    session: Session = Depends(get_db_session),
):
    return success("Category updated", update_category_service(session, category_id, payload))


@router.delete("/{category_id}", response_model=SuccessResponse[None])
def delete_category_endpoint(category_id: EntityId, session: Session = Depends(get_db_session)):
    """Delete a category; refused with 409 while courses reference it."""
    delete_category_service(session, category_id)
    return success("Category deleted")
