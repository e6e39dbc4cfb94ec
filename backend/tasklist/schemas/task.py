from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional

from tasklist.models.task import TaskStatus

class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    due_date: Optional[date] = None
    status: Optional[TaskStatus] = None

class TaskUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    due_date: Optional[date] = None
    status: Optional[TaskStatus] = None

    @model_validator(mode="after")
    def _reject_null_required(self) -> "TaskUpdate":
        # description and due_date may be cleared; title and status may not.
        for name in ("title", "status"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    list_id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[str] = None
    status: TaskStatus
    created_at: datetime
    updated_at: datetime
