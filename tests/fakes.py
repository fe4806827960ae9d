# tests/fakes.py

from __future__ import annotations

from taskboard.models.task import Task


class FakePasswordHasher:
    """
    Reversible stand-in for the bcrypt hasher.

    Keeps service tests fast; the real hasher is covered in test_security.py.
    """

    def hash(self, password: str) -> str:
        return f"hashed::{password}"

    def verify(self, password: str, hashed_password: str) -> bool:
        return hashed_password == f"hashed::{password}"


class FakeTokenService:
    """Issues predictable tokens and records who they were issued for."""

    def __init__(self) -> None:
        self.issued_for: list[str] = []

    def issue(self, user) -> str:
        self.issued_for.append(user.username)
        return f"token-for-{user.id}"


class ExplodingTaskRepository:
    """Task store whose writes always fail, for the 500 paths."""

    def __init__(self, existing: Task | None = None) -> None:
        self.existing = existing

    def find_by_id(self, task_id: str):
        if self.existing is not None and self.existing.id == task_id:
            return self.existing
        return None

    def insert(self, task: Task):
        raise RuntimeError("disk I/O error")

    def update(self, task: Task):
        raise RuntimeError("disk I/O error")

    def delete(self, task: Task):
        raise RuntimeError("disk I/O error")

    def list_by_owner(self, owner_id, skip, take, filters):
        raise RuntimeError("disk I/O error")

    def count_by_owner(self, owner_id, filters):
        raise RuntimeError("disk I/O error")


class RecordingTaskRepository:
    """In-memory task store that records the paging/filter arguments it receives."""

    def __init__(self, rows: list[Task], total: int) -> None:
        self.rows = rows
        self.total = total
        self.list_calls: list[tuple] = []
        self.count_calls: list[tuple] = []

    def list_by_owner(self, owner_id, skip, take, filters):
        self.list_calls.append((owner_id, skip, take, filters))
        return self.rows[skip:skip + take]

    def count_by_owner(self, owner_id, filters):
        self.count_calls.append((owner_id, filters))
        return self.total
