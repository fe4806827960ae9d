# tests/test_auth_service.py

from __future__ import annotations

import pytest

from taskboard.models import User
from taskboard.services import AuthService


@pytest.fixture()
def auth(user_repository, password_hasher, token_service) -> AuthService:
    return AuthService(user_repository, password_hasher, token_service)


def test_register_returns_token_and_persists_hashed_password(auth, session, token_service) -> None:
    result = auth.register_user("alice", "a@x.com", "Pw1234!")

    assert result.success is True
    assert result.code == 200
    assert result.message == "User registered successfully."
    assert result.data

    stored = session.query(User).filter_by(username="alice").one()
    assert stored.password_hash != "Pw1234!"
    assert result.data == f"token-for-{stored.id}"
    assert token_service.issued_for == ["alice"]


def test_register_same_username_twice_keeps_one_row(auth, session) -> None:
    assert auth.register_user("alice", "a@x.com", "Pw1234!").success

    second = auth.register_user("alice", "other@x.com", "Pw1234!")

    assert second.success is False
    assert second.code == 400
    assert second.message == "Username already exists."
    assert session.query(User).count() == 1


@pytest.mark.parametrize(
    ("username", "email", "message"),
    [
        ("", "a@x.com", "Username is required."),
        ("   ", "a@x.com", "Username is required."),
        ("alice", "", "Email is required."),
        ("", "", "Username is required."),
    ],
)
def test_register_requires_username_then_email(auth, session, username, email, message) -> None:
    result = auth.register_user(username, email, "Pw1234!")

    assert result.success is False
    assert result.code == 400
    assert result.message == message
    assert session.query(User).count() == 0


def test_register_with_taken_email_reports_failure_after_reload(auth, session) -> None:
    assert auth.register_user("alice", "a@x.com", "Pw1234!").success

    result = auth.register_user("alicia", "a@x.com", "Pw1234!")

    assert result.success is False
    assert result.code == 400
    assert result.message == "User registration failed."
    assert session.query(User).count() == 1


def test_register_race_on_username_never_returns_other_users_token(
    auth, user_repository, session, token_service, monkeypatch
) -> None:
    assert auth.register_user("alice", "a@x.com", "Pw1234!").success
    # Simulate a concurrent registration slipping past the existence check
    monkeypatch.setattr(user_repository, "exists_by_username", lambda username: False)

    result = auth.register_user("alice", "mallory@x.com", "Other999!")

    assert result.success is False
    assert result.code == 400
    assert result.message == "User registration failed."
    assert result.data is None
    assert token_service.issued_for == ["alice"]
    assert session.query(User).count() == 1


def test_register_reports_failure_when_reload_misses(auth, user_repository, monkeypatch) -> None:
    monkeypatch.setattr(user_repository, "find_by_username", lambda username: None)

    result = auth.register_user("alice", "a@x.com", "Pw1234!")

    assert result.success is False
    assert result.message == "User registration failed."


def test_register_store_failure_becomes_500(auth, user_repository, monkeypatch) -> None:
    def boom(username):
        raise RuntimeError("database is locked")

    monkeypatch.setattr(user_repository, "exists_by_username", boom)

    result = auth.register_user("alice", "a@x.com", "Pw1234!")

    assert result.success is False
    assert result.code == 500
    assert "database is locked" in result.message


def test_authenticate_by_username_and_by_email(auth) -> None:
    auth.register_user("alice", "a@x.com", "Pw1234!")

    by_name = auth.authenticate_user("alice", "Pw1234!")
    by_email = auth.authenticate_user("a@x.com", "Pw1234!")

    for result in (by_name, by_email):
        assert result.success is True
        assert result.code == 200
        assert result.message == "Authenticating..."
        assert result.data


def test_wrong_password_and_unknown_user_are_indistinguishable(auth) -> None:
    auth.register_user("alice", "a@x.com", "Pw1234!")

    wrong_password = auth.authenticate_user("alice", "nope")
    unknown_user = auth.authenticate_user("mallory", "Pw1234!")

    assert wrong_password.model_dump() == unknown_user.model_dump()
    assert wrong_password.success is False
    assert wrong_password.message == "Invalid username or password."


def test_identifier_with_at_sign_is_looked_up_as_email(auth, session) -> None:
    # Usernames cannot normally contain @, but rows created elsewhere might
    session.add(User(username="odd@name", email="odd@example.com", password_hash="hashed::Pw1234!"))
    session.commit()

    result = auth.authenticate_user("odd@name", "Pw1234!")

    assert result.success is False
    assert result.message == "Invalid username or password."
