"""Shared test fixtures."""

from __future__ import annotations

import pytest
import sqlalchemy as sa
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

import ats_api.models  # noqa: F401  registers tables on Base.metadata
from ats_api.db.base import Base
from ats_api.db.session import create_db_engine
from ats_api.models.organization import Organization
from ats_api.models.user import User


@pytest.fixture(scope="session", autouse=True)
def set_test_env(monkeypatch_session):
    """Set test environment variables before any tests run."""
    monkeypatch_session.setenv("ATS_API_DATABASE_URL", "sqlite:///:memory:")
    from ats_api.core.config import get_settings

    get_settings.cache_clear()


@pytest.fixture(scope="session")
def monkeypatch_session():
    """Session-scoped monkeypatch for environment setup."""
    from _pytest.monkeypatch import MonkeyPatch

    mp = MonkeyPatch()
    yield mp
    mp.undo()


@pytest.fixture
def db_engine():
    """In-memory SQLite engine with foreign keys enforced."""
    engine = create_db_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=sa.pool.StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Session:
    session = Session(db_engine)
    yield session
    session.close()


@pytest.fixture
def app(db_engine, db_session: Session) -> FastAPI:
    """Full application with the database dependency pointed at the test engine."""
    from ats_api.app import create_app
    from ats_api.db.session import get_db

    app = create_app()
    app.state.db_engine = db_engine
    app.state.db_session_factory = sessionmaker(bind=db_engine)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def user_factory(db_session: Session):
    """Create and persist users.

    Usage:
        def test_something(user_factory):
            user = user_factory(email="someone@example.com")
    """
    counter = {"n": 0}

    def _create_user(
        name: str = "Recruiter",
        email: str | None = None,
        password_hash: str = "hashed-password",
    ) -> User:
        counter["n"] += 1
        user = User(
            name=name,
            email=email or f"user{counter['n']}@example.com",
            password_hash=password_hash,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create_user


@pytest.fixture
def organization_factory(db_session: Session, user_factory):
    def _create_organization(name: str = "Acme Staffing", created_by: User | None = None) -> Organization:
        creator = created_by or user_factory()
        organization = Organization(name=name, created_by_user_id=creator.user_id)
        db_session.add(organization)
        db_session.commit()
        db_session.refresh(organization)
        return organization

    return _create_organization
