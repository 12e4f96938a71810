"""Shared pytest fixtures for course admin test suites."""

from collections.abc import Callable
from collections.abc import Generator
from datetime import datetime
from pathlib import Path
import os
import sys

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("COURSE_ADMIN_DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("COURSE_ADMIN_ENV", "test")

ADMIN_PASSWORD = "admin-secret"
USER_PASSWORD = "user-secret"


@pytest.fixture(scope="session")
def password_hashes() -> dict[str, str]:
    """Hash fixture passwords once; bcrypt is deliberately slow."""
    from course_admin.core.security import hash_password

    return {
        ADMIN_PASSWORD: hash_password(ADMIN_PASSWORD),
        USER_PASSWORD: hash_password(USER_PASSWORD),
    }


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory database per test, with foreign keys enforced."""
    from course_admin.db.base import enable_sqlite_foreign_keys
    from course_admin.db.models import Base

    test_engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    from course_admin.db.base import build_session_factory

    return build_session_factory(engine)


@pytest.fixture
def app(session_factory: sessionmaker[Session]) -> Generator[FastAPI, None, None]:
    """The application with its session dependency bound to the test database."""
    from course_admin.db.base import get_db_session
    from course_admin.main import app as application

    def _get_test_session() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[get_db_session] = _get_test_session
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Provide an API test client for contract and integration suites."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(
    session_factory: sessionmaker[Session],
    password_hashes: dict[str, str],
) -> Callable[..., int]:
    """Insert a user row directly and return its id."""
    from course_admin.db.repository.users import create_user

    def _make_user(
        username: str,
        *,
        role: int = 0,
        sex: int = 2,
        password: str = USER_PASSWORD,
        created_at: datetime | None = None,
    ) -> int:
        with session_factory() as session:
            user = create_user(
                session,
                email=f"{username}@example.com",
                username=username,
                password_hash=password_hashes[password],
                nickname=username.title(),
                sex=sex,
                role=role,
            )
            if created_at is not None:
                user.created_at = created_at
            session.commit()
            return user.id

    return _make_user


@pytest.fixture
def admin_id(make_user: Callable[..., int]) -> int:
    return make_user("admin", role=100, password=ADMIN_PASSWORD)


@pytest.fixture
def plain_user_id(make_user: Callable[..., int]) -> int:
    return make_user("learner")


def bearer(user_id: int) -> dict[str, str]:
    from course_admin.core.config import get_settings
    from course_admin.core.security import issue_credential

    return {"Authorization": f"Bearer {issue_credential(get_settings(), user_id=user_id)}"}


@pytest.fixture
def admin_headers(admin_id: int) -> dict[str, str]:
    return bearer(admin_id)


@pytest.fixture
def user_headers(plain_user_id: int) -> dict[str, str]:
    return bearer(plain_user_id)


@pytest.fixture
def token_for() -> Callable[[int], dict[str, str]]:
    """Build credential headers for an arbitrary user id."""
    return bearer
