# taskboard/schemas.py

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from taskboard.models.task import Task


T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """
    Uniform envelope returned by every service operation.
    ``code`` mirrors HTTP semantics and is used verbatim as the response status.
    """

    success: bool
    code: int
    message: str
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: T, message: str = "", code: int = 200) -> "Result[T]":
        return cls(success=True, code=code, message=message, data=data)

    @classmethod
    def fail(cls, message: str, code: int = 400, data: Optional[T] = None) -> "Result[T]":
        return cls(success=False, code=code, message=message, data=data)


class TaskDto(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: str
    priority: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> "TaskDto":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            status=task.status.value,
            priority=task.priority.value,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskPage(BaseModel):
    tasks: Optional[list[TaskDto]] = None
    page_number: int
    page_size: int
    total_count: int


class UserInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
