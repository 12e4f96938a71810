"""SQLAlchemy model for platform users and administrators."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime
from sqlalchemy import Integer
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import String
from sqlalchemy import Text
from sqlalchemy import UniqueConstraint
from sqlalchemy import func
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship


class Base(DeclarativeBase):
    """Declarative base for course admin ORM models."""


ADMIN_ROLE = 100


class RoleEnum(IntEnum):
    USER = 0
    ADMIN = ADMIN_ROLE


class SexEnum(IntEnum):
    MALE = 0
    FEMALE = 1
    UNSPECIFIED = 2


if TYPE_CHECKING:
    from course_admin.db.models.course import Course


class User(Base):
    """Registered account; administrators carry the admin role."""

    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_users"),
        UniqueConstraint("email", name="uq_users_email"),
        UniqueConstraint("username", name="uq_users_username"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    nickname: Mapped[str] = mapped_column(String(255), nullable=False)
    sex: Mapped[int] = mapped_column(Integer, nullable=False, default=SexEnum.UNSPECIFIED)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    introduce: Mapped[str | None] = mapped_column(Text, nullable=True)
    role: Mapped[int] = mapped_column(Integer, nullable=False, default=RoleEnum.USER, index=True)
    avatar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    courses: Mapped[list["Course"]] = relationship("Course", back_populates="user", passive_deletes="all")
