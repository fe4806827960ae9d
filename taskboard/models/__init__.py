# taskboard/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()


from .user import User  # noqa: E402
from .task import Task, TaskPriority, TaskStatus  # noqa: E402

__all__ = ["Base", "User", "Task", "TaskPriority", "TaskStatus"]
