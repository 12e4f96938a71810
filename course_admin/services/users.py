"""Service helpers for user API operations."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_admin.core.errors import BadRequestError
from course_admin.core.errors import NotFoundError
from course_admin.core.security import hash_password
from course_admin.db.models.user import User
from course_admin.db.repository.users import USER_FILTERS
from course_admin.db.repository.users import USER_ORDER
from course_admin.db.repository.users import create_user
from course_admin.db.repository.users import delete_user
from course_admin.db.repository.users import get_user
from course_admin.db.repository.users import get_user_by_email
from course_admin.db.repository.users import get_user_by_username
from course_admin.db.repository.users import list_users
from course_admin.db.repository.users import update_user
from course_admin.schemas.user import UserCreate
from course_admin.schemas.user import UserUpdate
from course_admin.services.changes import collect_changes
from course_admin.services.integrity import guarded_delete
from course_admin.services.listing import build_query_spec
from course_admin.services.listing import list_payload


def _ensure_unique(
    session: Session,
    *,
    email: str | None,
    username: str | None,
    current: User | None = None,
) -> None:
    if email is not None:
        existing = get_user_by_email(session, email)
        if existing is not None and existing is not current:
            raise BadRequestError(message="Email is already registered", field="email")
    if username is not None:
        existing = get_user_by_username(session, username)
        if existing is not None and existing is not current:
            raise BadRequestError(message="Username is already taken", field="username")


def list_users_service(
    session: Session,
    *,
    page_num: str | None,
    page_size: str | None,
    filters: Mapping[str, str | None],
):
    """Page through users."""
    spec = build_query_spec(
        page_num=page_num,
        page_size=page_size,
        filters=filters,
        fields=USER_FILTERS,
        order_by=USER_ORDER,
    )
    total, rows = list_users(session, spec)
    return list_payload(spec, total, rows)


def get_user_service(session: Session, user_id: int, *, for_update: bool = False):
    """Fetch a user or raise not found."""
    user = get_user(session, user_id, for_update=for_update)
    if user is None:
        raise NotFoundError(message=f"User id: {user_id} not found")
    return user


def create_user_service(session: Session, payload: UserCreate):
    """Create a user account with a hashed password."""
    _ensure_unique(session, email=payload.email, username=payload.username)
    try:
        user = create_user(
            session,
            email=payload.email,
            username=payload.username,
            password_hash=hash_password(payload.password),
            nickname=payload.nickname,
            sex=int(payload.sex),
            role=int(payload.role),
            company=payload.company,
            introduce=payload.introduce,
            avatar=payload.avatar,
        )
        session.commit()
        return user
    except IntegrityError as exc:
        session.rollback()
        raise BadRequestError(message="Email or username is already in use") from exc


def update_user_service(session: Session, user_id: int, payload: UserUpdate):
    """Update mutable user fields; a new password is re-hashed."""
    user = get_user_service(session, user_id)
    changes = collect_changes(payload, User)
    _ensure_unique(session, email=changes.get("email"), username=changes.get("username"), current=user)
    if "password" in changes:
        changes["password"] = hash_password(changes["password"])
    for key in ("sex", "role"):
        if key in changes:
            changes[key] = int(changes[key])
    try:
        user = update_user(session, user, changes)
        session.commit()
        return user
    except IntegrityError as exc:
        session.rollback()
        raise BadRequestError(message="Email or username is already in use") from exc


def delete_user_service(session: Session, user_id: int) -> None:
    """Delete a user unless they still author courses."""
    user = get_user_service(session, user_id, for_update=True)
    guarded_delete(session, user, delete_user)
