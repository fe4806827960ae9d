# tests/conftest.py

from __future__ import annotations

import os

# Must be in place before taskboard.main builds the app at import time
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.core.config import Settings, get_settings
from taskboard.database import get_db
from taskboard.main import app
from taskboard.models import Base, User
from taskboard.repositories import TaskRepository, UserRepository

from .fakes import FakePasswordHasher, FakeTokenService


@pytest.fixture()
def engine():
    """
    One in-memory SQLite database per test.

    StaticPool keeps a single connection so the TestClient's worker threads
    see the same database as the test body.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory) -> Session:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def user_repository(session: Session) -> UserRepository:
    return UserRepository(session)


@pytest.fixture()
def task_repository(session: Session) -> TaskRepository:
    return TaskRepository(session)


@pytest.fixture()
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture()
def token_service() -> FakeTokenService:
    return FakeTokenService()


def _make_user(session: Session, username: str) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        password_hash="hashed::Password123",
    )
    session.add(user)
    session.commit()
    return user


@pytest.fixture()
def alice(session: Session) -> User:
    return _make_user(session, "alice")


@pytest.fixture()
def bob(session: Session) -> User:
    return _make_user(session, "bob")


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        jwt_secret_key="test-secret-key",
        access_token_expire_minutes=5,
        bcrypt_rounds=4,
    )


@pytest.fixture()
def client(session_factory, settings: Settings) -> TestClient:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
