"""Request-scoped dependencies shared by the admin routers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from fastapi import Header
from fastapi import Path
from fastapi import Query
from fastapi import Request
from sqlalchemy.orm import Session

from course_admin.core.config import Settings
from course_admin.core.config import get_settings
from course_admin.db.base import get_db_session
from course_admin.db.models.user import User
from course_admin.db.query import INT32_MAX
from course_admin.services.auth import require_role
from course_admin.services.auth import resolve_principal

EntityId = Annotated[int, Path(ge=1, le=INT32_MAX)]


@dataclass(frozen=True)
class PageParams:
    page_num: str | None
    page_size: str | None


def get_page_params(
    page_num: str | None = Query(default=None, alias="pageNum"),
    page_size: str | None = Query(default=None, alias="pageSize"),
) -> PageParams:
    """Collect raw paging parameters; normalization happens in the query builder."""
    return PageParams(page_num=page_num, page_size=page_size)


def _extract_bearer(authorization: str | None) -> str | None:
    scheme, _, value = (authorization or "").strip().partition(" ")
    if scheme.lower() != "bearer" or not value.strip():
        return None
    return value.strip()


def get_credential(
    authorization: str | None = Header(default=None),
    token: str | None = Header(default=None),
) -> str | None:
    """Read the credential from ``Authorization: Bearer`` or the legacy ``token`` header."""
    if authorization:
        return _extract_bearer(authorization)
    return token


def get_current_user(
    request: Request,
    credential: str | None = Depends(get_credential),
    session: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> User:
    """Authenticate the caller, whatever their role, and attach the principal."""
    user = resolve_principal(session, settings, credential)
    request.state.principal = user
    return user


def get_current_admin(user: User = Depends(get_current_user)) -> User:
    """Authenticate the caller and require the admin role."""
    return require_role(user)
