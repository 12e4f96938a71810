"""Model module imports for SQLAlchemy relationship registration."""

from course_admin.db.models.article import Article
from course_admin.db.models.category import Category
from course_admin.db.models.chapter import Chapter
from course_admin.db.models.course import Course
from course_admin.db.models.setting import Setting
from course_admin.db.models.user import Base
from course_admin.db.models.user import User

__all__ = [
    "Article",
    "Base",
    "Category",
    "Chapter",
    "Course",
    "Setting",
    "User",
]
