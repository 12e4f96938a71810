"""Service-level behavior of the dependent-row delete guard."""

from __future__ import annotations

import logging

import pytest
from sqlalchemy.orm import Session
from sqlalchemy.orm import sessionmaker

from course_admin.core.errors import ConflictError
from course_admin.core.errors import NotFoundError
from course_admin.db.models import Category
from course_admin.db.models import Course
from course_admin.db.repository.categories import delete_category
from course_admin.services import integrity
from course_admin.services.categories import delete_category_service
from course_admin.services.integrity import guarded_delete


@pytest.fixture
def populated_category(session_factory: sessionmaker[Session], admin_id: int) -> int:
    with session_factory() as session:
        category = Category(name="Backend", rank=1)
        session.add(category)
        session.flush()
        session.add(Course(category_id=category.id, user_id=admin_id, name="SQL"))
        session.commit()
        return category.id


def test_guard_blocks_and_leaves_rows_intact(
    session_factory: sessionmaker[Session],
    populated_category: int,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="course_admin.services.integrity")

    with session_factory() as session:
        with pytest.raises(ConflictError) as excinfo:
            delete_category_service(session, populated_category)
        assert excinfo.value.status_code == 409
        assert session.get(Category, populated_category) is not None

    assert "Delete blocked by dependents entity=Category" in caplog.text


def test_constraint_backstops_a_missing_count(
    session_factory: sessionmaker[Session],
    populated_category: int,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(integrity, "DEPENDENT_CHECKS", {})

    with session_factory() as session:
        category = session.get(Category, populated_category)
        with pytest.raises(ConflictError) as excinfo:
            guarded_delete(session, category, delete_category)
        assert excinfo.value.message == "Category is still referenced and cannot be deleted"

    with session_factory() as session:
        assert session.get(Category, populated_category) is not None


def test_guard_deletes_unreferenced_parent(session_factory: sessionmaker[Session]) -> None:
    with session_factory() as session:
        category = Category(name="Empty", rank=1)
        session.add(category)
        session.commit()
        category_id = category.id

    with session_factory() as session:
        delete_category_service(session, category_id)

    with session_factory() as session:
        assert session.get(Category, category_id) is None
        with pytest.raises(NotFoundError):
            delete_category_service(session, category_id)
