"""SQLAlchemy model for courses."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean
from sqlalchemy import DateTime
from sqlalchemy import ForeignKey
from sqlalchemy import Integer
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import String
from sqlalchemy import Text
from sqlalchemy import false
from sqlalchemy import func
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship

from course_admin.db.models.user import Base

if TYPE_CHECKING:
    from course_admin.db.models.category import Category
    from course_admin.db.models.chapter import Chapter
    from course_admin.db.models.user import User


class Course(Base):
    """Course under a category, authored by a user."""

    __tablename__ = "courses"
    __table_args__ = (PrimaryKeyConstraint("id", name="pk_courses"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id", name="fk_courses_category_id_categories", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", name="fk_courses_user_id_users", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)
    recommended: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    introductory: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    chapters_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
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

    category: Mapped["Category"] = relationship("Category", back_populates="courses")
    user: Mapped["User"] = relationship("User", back_populates="courses")
    chapters: Mapped[list["Chapter"]] = relationship("Chapter", back_populates="course", passive_deletes="all")
