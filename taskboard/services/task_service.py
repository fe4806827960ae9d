# taskboard/services/task_service.py

import logging
from datetime import datetime
from typing import Optional

from taskboard.core.dates import to_utc_naive
from taskboard.models.task import (
    Task,
    TaskPriority,
    TaskStatus,
    allowed_values,
    parse_priority,
    parse_status,
)
from taskboard.repositories.task_repository import TaskFilters, TaskRepository
from taskboard.schemas import Result, TaskDto, TaskPage


logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found."

# Largest OFFSET/LIMIT the store accepts (signed 64-bit)
MAX_SQL_INT = 2**63 - 1


def _provided(value) -> bool:
    """A field counts as supplied when it is not None and, for strings, not blank."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _error(exc: Exception) -> str:
    return f"An error occurred: {exc}"


class TaskService:
    """
    Owner-scoped task CRUD.

    Status and priority are parsed strictly on create (bad input is a 400) and
    leniently on list filters and updates (bad input is ignored).
    A task owned by someone else is reported exactly like a missing one.
    """

    def __init__(self, task_repository: TaskRepository):
        self.tasks = task_repository

    def create_task(
        self,
        owner_id: str,
        title: str,
        description: Optional[str] = None,
        due_date: Optional[datetime] = None,
        status: str = TaskStatus.PENDING.value,
        priority: str = TaskPriority.HIGH.value,
    ) -> Result[bool]:
        logger.info("Attempting to create task for user %s with title %s", owner_id, title)

        if not _provided(title):
            return Result[bool].fail("Title is required.", data=False)

        parsed_status = parse_status(status)
        if parsed_status is None:
            return Result[bool].fail(
                f"Invalid status value. Allowed values: {allowed_values(TaskStatus)}.",
                data=False,
            )

        parsed_priority = parse_priority(priority)
        if parsed_priority is None:
            return Result[bool].fail(
                f"Invalid priority value. Allowed values: {allowed_values(TaskPriority)}.",
                data=False,
            )

        try:
            task = self.tasks.insert(Task(
                title=title,
                description=description,
                due_date=to_utc_naive(due_date) if due_date is not None else None,
                status=parsed_status,
                priority=parsed_priority,
                user_id=owner_id,
            ))
        except Exception as e:
            logger.exception("An error occurred while creating a task for user %s", owner_id)
            return Result[bool].fail(_error(e), code=500, data=False)

        logger.info("Task %s created successfully for user %s", task.id, owner_id)
        return Result[bool].ok(True, "Task created successfully.", code=201)

    def list_tasks(
        self,
        owner_id: str,
        page_number: int,
        page_size: int,
        due_date: Optional[datetime] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> Result[TaskPage]:
        logger.info("Attempting to retrieve tasks for user %s", owner_id)

        if page_number < 1:
            return Result[TaskPage].fail("Page number must be at least 1.")
        if page_size < 1:
            return Result[TaskPage].fail("Page size must be at least 1.")
        if page_size > MAX_SQL_INT:
            return Result[TaskPage].fail("Page size is too large.")

        skip = (page_number - 1) * page_size
        if skip > MAX_SQL_INT:
            return Result[TaskPage].fail("Page number is too large.")

        # Unrecognised filter values fall back to "no filter"
        filters = TaskFilters(
            status=parse_status(status) if _provided(status) else None,
            priority=parse_priority(priority) if _provided(priority) else None,
            due_date=due_date,
        )

        try:
            rows = self.tasks.list_by_owner(owner_id, skip, page_size, filters)
            total_count = self.tasks.count_by_owner(owner_id, filters)
        except Exception as e:
            logger.exception("An error occurred while retrieving tasks for user %s", owner_id)
            return Result[TaskPage].fail(_error(e), code=500)

        if not rows:
            logger.warning("No tasks found for user %s with the specified criteria", owner_id)
            return Result[TaskPage].fail(
                "No tasks found.",
                code=404,
                data=TaskPage(
                    tasks=None,
                    page_number=page_number,
                    page_size=page_size,
                    total_count=total_count,
                ),
            )

        page = TaskPage(
            tasks=[TaskDto.from_task(task) for task in rows],
            page_number=page_number,
            page_size=page_size,
            total_count=total_count,
        )
        logger.info("Successfully retrieved %d tasks for user %s", len(rows), owner_id)
        return Result[TaskPage].ok(page, "Tasks retrieved successfully.")

    def get_task(self, task_id: str, owner_id: str) -> Result[TaskDto]:
        logger.info("Attempting to retrieve task %s for user %s", task_id, owner_id)
        try:
            task = self._owned_task(task_id, owner_id)
        except Exception as e:
            logger.exception("An error occurred while retrieving task %s for user %s", task_id, owner_id)
            return Result[TaskDto].fail(_error(e), code=500)

        if task is None:
            logger.warning("Task %s not found for user %s", task_id, owner_id)
            return Result[TaskDto].fail(TASK_NOT_FOUND, code=404)

        return Result[TaskDto].ok(TaskDto.from_task(task), "Task retrieved successfully.")

    def update_task(
        self,
        task_id: str,
        owner_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        due_date: Optional[datetime] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> Result[bool]:
        logger.info("Attempting to update task %s for user %s", task_id, owner_id)
        try:
            task = self._owned_task(task_id, owner_id)
            if task is None:
                logger.warning("Update failed. Task %s not found for user %s", task_id, owner_id)
                return Result[bool].fail(TASK_NOT_FOUND, code=404, data=False)

            if _provided(title):
                task.title = title
            if _provided(description):
                task.description = description
            if due_date is not None:
                task.due_date = to_utc_naive(due_date)
            if _provided(status):
                task.status = parse_status(status) or task.status
            if _provided(priority):
                task.priority = parse_priority(priority) or task.priority

            self.tasks.update(task)
        except Exception as e:
            logger.exception("An error occurred while updating task %s for user %s", task_id, owner_id)
            return Result[bool].fail(_error(e), code=500, data=False)

        logger.info("Task %s updated successfully for user %s", task_id, owner_id)
        return Result[bool].ok(True, "Task updated successfully.")

    def delete_task(self, task_id: str, owner_id: str) -> Result[bool]:
        logger.info("Attempting to delete task %s for user %s", task_id, owner_id)
        try:
            task = self._owned_task(task_id, owner_id)
            if task is None:
                logger.warning("Delete failed. Task %s not found for user %s", task_id, owner_id)
                return Result[bool].fail(TASK_NOT_FOUND, code=404, data=False)

            self.tasks.delete(task)
        except Exception as e:
            logger.exception("An error occurred while deleting task %s for user %s", task_id, owner_id)
            return Result[bool].fail(_error(e), code=500, data=False)

        logger.info("Task %s deleted successfully for user %s", task_id, owner_id)
        return Result[bool].ok(True, "Task deleted successfully.")

    def _owned_task(self, task_id: str, owner_id: str) -> Optional[Task]:
        task = self.tasks.find_by_id(task_id)
        if task is None or task.user_id != owner_id:
            return None
        return task
