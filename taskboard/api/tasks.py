# taskboard/api/tasks.py

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from taskboard.api.deps import get_current_user, get_task_service
from taskboard.api.responses import envelope, failure
from taskboard.core.dates import parse_due_date
from taskboard.models.user import User
from taskboard.services import TaskService


router = APIRouter(prefix="/tasks", tags=["tasks"])


class CreateTaskRequest(BaseModel):
    title: str = Field(..., description="Task name.")
    description: str | None = None
    due_date: str | None = Field(None, description="yyyy-MM-dd or yyyy-MM-ddTHH:mm:ssZ")
    status: str = Field("Pending", description="Pending, InProgress or Completed.")
    priority: str = Field("High", description="Low, Medium or High.")


class UpdateTaskRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    status: str | None = None
    priority: str | None = None


# -------------------------------
# Task Endpoints (bearer token required)
# -------------------------------

@router.post("")
def create_task(
    req: CreateTaskRequest,
    user: User = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    try:
        due_date = parse_due_date(req.due_date)
    except ValueError as e:
        return failure(str(e))

    result = tasks.create_task(
        user.id, req.title, req.description, due_date, req.status, req.priority
    )
    return envelope(result)


@router.get("")
def list_tasks(
    page_number: int = Query(1),
    page_size: int = Query(10),
    due_date: str | None = None,
    status: str | None = None,
    priority: str | None = None,
    user: User = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    try:
        due_date_filter = parse_due_date(due_date)
    except ValueError as e:
        return failure(str(e))

    result = tasks.list_tasks(
        user.id, page_number, page_size, due_date_filter, status, priority
    )
    return envelope(result)


@router.get("/{task_id}")
def get_task(
    task_id: str,
    user: User = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    return envelope(tasks.get_task(task_id, user.id))


@router.put("/{task_id}")
def update_task(
    task_id: str,
    req: UpdateTaskRequest,
    user: User = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    try:
        due_date = parse_due_date(req.due_date)
    except ValueError as e:
        return failure(str(e))

    result = tasks.update_task(
        task_id, user.id, req.title, req.description, due_date, req.status, req.priority
    )
    return envelope(result)


@router.delete("/{task_id}")
def delete_task(
    task_id: str,
    user: User = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    return envelope(tasks.delete_task(task_id, user.id))
