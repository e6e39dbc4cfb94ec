from .users import create_user, find_user_by_email, get_user_by_id
from .task_lists import (
    create_task_list,
    delete_task_list,
    get_task_list,
    get_task_lists_by_user_id,
)
from .tasks import create_task, delete_task, get_task, get_tasks_by_list_id, update_task

__all__ = [
    "create_user",
    "find_user_by_email",
    "get_user_by_id",
    "create_task_list",
    "delete_task_list",
    "get_task_list",
    "get_task_lists_by_user_id",
    "create_task",
    "delete_task",
    "get_task",
    "get_tasks_by_list_id",
    "update_task",
]
