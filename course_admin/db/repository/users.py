"""Repository primitives for user entities."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy import or_
from sqlalchemy import select
from sqlalchemy.orm import Session

from course_admin.db.models.user import User
from course_admin.db.query import FilterField
from course_admin.db.query import MatchMode
from course_admin.db.query import QuerySpec
from course_admin.db.query import fetch_page
from course_admin.db.query import to_int

USER_FILTERS = (
    FilterField("email", User.email, MatchMode.EXACT),
    FilterField("username", User.username, MatchMode.EXACT),
    FilterField("nickname", User.nickname, MatchMode.CONTAINS),
    FilterField("role", User.role, MatchMode.EXACT, to_int),
)
USER_ORDER = (User.id.asc(),)


def create_user(
    session: Session,
    *,
    email: str,
    username: str,
    password_hash: str,
    nickname: str,
    sex: int,
    role: int,
    company: str | None = None,
    introduce: str | None = None,
    avatar: str | None = None,
) -> User:
    """Create and return a user row; the password must already be hashed."""
    user = User(
        email=email,
        username=username,
        password=password_hash,
        nickname=nickname,
        sex=sex,
        role=role,
        company=company,
        introduce=introduce,
        avatar=avatar,
    )
    session.add(user)
    session.flush()
    session.refresh(user)
    return user


def get_user(session: Session, user_id: int, *, for_update: bool = False) -> User | None:
    """Fetch a user by id."""
    return session.get(User, user_id, with_for_update=True if for_update else None)


def get_user_by_email(session: Session, email: str) -> User | None:
    return session.scalars(select(User).where(User.email == email)).first()


def get_user_by_username(session: Session, username: str) -> User | None:
    return session.scalars(select(User).where(User.username == username)).first()


def get_user_by_login(session: Session, login: str) -> User | None:
    """Fetch a user whose email or username equals ``login``."""
    stmt = select(User).where(or_(User.email == login, User.username == login))
    return session.scalars(stmt).first()


def list_users(session: Session, spec: QuerySpec) -> tuple[int, list[User]]:
    """Count and page users matching a query spec."""
    return fetch_page(session, User, spec)


def count_users_by_sex(session: Session) -> dict[int, int]:
    stmt = select(User.sex, func.count()).group_by(User.sex)
    return {sex: count for sex, count in session.execute(stmt)}


def list_user_created_at(session: Session) -> list[datetime]:
    """Return every user's creation timestamp, oldest first."""
    stmt = select(User.created_at).order_by(User.created_at.asc())
    return list(session.scalars(stmt))


def update_user(session: Session, user: User, changes: Mapping[str, Any]) -> User:
    """Apply validated field changes; keys are model attribute names."""
    for key, value in changes.items():
        setattr(user, key, value)
    session.flush()
    session.refresh(user)
    return user


def delete_user(session: Session, user: User) -> None:
    session.delete(user)
    session.flush()
