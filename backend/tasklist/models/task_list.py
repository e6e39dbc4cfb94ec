from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone

class TaskList(SQLModel, table=True):
    __tablename__ = "task_lists"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    name: str

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
