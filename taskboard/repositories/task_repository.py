# taskboard/repositories/task_repository.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from taskboard.core.dates import day_bounds
from taskboard.models.task import Task, TaskPriority, TaskStatus


@dataclass(frozen=True)
class TaskFilters:
    """Optional predicates shared by the page query and the count query."""

    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None


class TaskRepository:
    """Task store. Every write commits, and rolls back before re-raising on failure."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, task_id: str) -> Optional[Task]:
        return self.session.get(Task, task_id)

    def insert(self, task: Task) -> Task:
        self.session.add(task)
        self._commit()
        self.session.refresh(task)
        return task

    def update(self, task: Task) -> Task:
        self.session.add(task)
        self._commit()
        self.session.refresh(task)
        return task

    def delete(self, task: Task) -> None:
        self.session.delete(task)
        self._commit()

    def list_by_owner(
        self,
        owner_id: str,
        skip: int,
        take: int,
        filters: TaskFilters = TaskFilters(),
    ) -> list[Task]:
        return (
            self._filtered(owner_id, filters)
            .order_by(Task.created_at.asc(), Task.id.asc())
            .offset(skip)
            .limit(take)
            .all()
        )

    def count_by_owner(self, owner_id: str, filters: TaskFilters = TaskFilters()) -> int:
        return self._filtered(owner_id, filters).count()

    def _filtered(self, owner_id: str, filters: TaskFilters) -> Query:
        query = self.session.query(Task).filter(Task.user_id == owner_id)

        if filters.status is not None:
            query = query.filter(Task.status == filters.status)

        if filters.due_date is not None:
            start, end = day_bounds(filters.due_date)
            query = query.filter(Task.due_date >= start, Task.due_date < end)

        if filters.priority is not None:
            query = query.filter(Task.priority == filters.priority)

        return query

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
