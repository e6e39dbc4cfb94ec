from enum import Enum
from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"


class Task(SQLModel, table=True):
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'in_progress', 'completed')",
            name="ck_tasks_status",
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    list_id: int = Field(foreign_key="task_lists.id", ondelete="CASCADE", index=True)

    title: str
    description: Optional[str] = None
    # ISO date, YYYY-MM-DD
    due_date: Optional[str] = None
    status: TaskStatus = Field(default=TaskStatus.pending)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
