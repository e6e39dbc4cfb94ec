from .user import User
from .task_list import TaskList
from .task import Task, TaskStatus

__all__ = ["User", "TaskList", "Task", "TaskStatus"]
