from .auth import router as auth_router
from .lists import router as lists_router
from .tasks import router as tasks_router

__all__ = ["auth_router", "lists_router", "tasks_router"]
