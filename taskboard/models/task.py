# taskboard/models/task.py

import enum
import uuid

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Index, String, Text
from taskboard.core.dates import utcnow
from . import Base


class TaskStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


class TaskPriority(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Case-insensitive lookup tables keyed by the lowercased wire name
_STATUS_BY_NAME = {member.value.lower(): member for member in TaskStatus}
_PRIORITY_BY_NAME = {member.value.lower(): member for member in TaskPriority}


def parse_status(value: str | None) -> TaskStatus | None:
    """Returns the matching TaskStatus, or None when ``value`` is not a known name."""
    if value is None:
        return None
    return _STATUS_BY_NAME.get(value.strip().lower())


def parse_priority(value: str | None) -> TaskPriority | None:
    if value is None:
        return None
    return _PRIORITY_BY_NAME.get(value.strip().lower())


def allowed_values(enum_cls) -> str:
    return ", ".join(member.value for member in enum_cls)


# -------------------------------
# Task Model
# -------------------------------

class Task(Base):
    """
    A personal task. Always read and written through its owner's id.
    """
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=True)
    status = Column(Enum(TaskStatus, name="task_status"), nullable=False, default=TaskStatus.PENDING)
    priority = Column(Enum(TaskPriority, name="task_priority"), nullable=False, default=TaskPriority.HIGH)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    __table_args__ = (
        Index("ix_tasks_user_due_date", "user_id", "due_date"),
    )

    def __repr__(self) -> str:
        return f"<Task id={self.id} user_id={self.user_id} status={self.status}>"
