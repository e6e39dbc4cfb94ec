from fastapi import APIRouter
from tasklist.api.routes import auth_router, lists_router, tasks_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(lists_router)
api_router.include_router(tasks_router)
