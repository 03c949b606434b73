"""Shared fixtures: a throwaway SQLite database and authenticated clients."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "agrilink-test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["CRON_SECRET"] = "cron-test-secret"
os.environ["APP_TIMEZONE"] = "Asia/Kolkata"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from agrilink.domain.entities import User, UserRole  # noqa: E402
from agrilink.infrastructure import database  # noqa: E402
from agrilink.infrastructure import models  # noqa: E402,F401
from agrilink.infrastructure.repositories import UserRepository  # noqa: E402
from agrilink.infrastructure.security import create_user_token  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    """Give every test empty tables."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)


@pytest.fixture()
def db_session() -> Iterator[Session]:
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """Return a test client bound to a clean application instance."""

    from agrilink.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    counter = {"value": 0}

    def factory(role: UserRole = UserRole.CUSTOMER, **overrides) -> User:
        counter["value"] += 1
        index = counter["value"]
        user = User(
            id=None,
            email=overrides.pop("email", f"user{index}@example.com"),
            phone=overrides.pop("phone", f"90000000{index:02d}"),
            full_name=overrides.pop("full_name", f"User {index}"),
            role=role,
            **overrides,
        )
        return UserRepository(db_session).create(user)

    return factory


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_user_token(user.id)}"}


@pytest.fixture()
def headers_for() -> Callable[[User], dict[str, str]]:
    return auth_headers
