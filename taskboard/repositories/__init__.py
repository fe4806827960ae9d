from .task_repository import TaskFilters, TaskRepository
from .user_repository import UserRepository

__all__ = ["TaskFilters", "TaskRepository", "UserRepository"]
