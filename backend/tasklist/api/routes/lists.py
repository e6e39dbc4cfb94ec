from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from tasklist.api.deps import get_current_user, get_session
from tasklist.models import User
from tasklist.repositories import (
    create_task,
    create_task_list,
    delete_task_list,
    get_task_list,
    get_task_lists_by_user_id,
    get_tasks_by_list_id,
)
from tasklist.schemas.task import TaskCreate, TaskOut
from tasklist.schemas.task_list import TaskListCreate, TaskListOut

router = APIRouter(prefix="/lists", tags=["lists"])


async def _owned_list_or_404(session: AsyncSession, list_id: int, user: User):
    task_list = await get_task_list(session, list_id, user.id)
    if not task_list:
        raise HTTPException(status_code=404, detail="Task list not found")
    return task_list


@router.get("", response_model=List[TaskListOut])
async def list_task_lists(user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    return await get_task_lists_by_user_id(session, user.id)


@router.post("", response_model=TaskListOut, status_code=201)
async def create_list(data: TaskListCreate, user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    return await create_task_list(session, user.id, data.name)


@router.delete("/{list_id}", status_code=204)
async def delete_list(list_id: int, user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    await _owned_list_or_404(session, list_id, user)
    await delete_task_list(session, list_id, user.id)
    return None


@router.get("/{list_id}/tasks", response_model=List[TaskOut])
async def list_tasks(list_id: int, user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    await _owned_list_or_404(session, list_id, user)
    return await get_tasks_by_list_id(session, list_id)


@router.post("/{list_id}/tasks", response_model=TaskOut, status_code=201)
async def add_task(list_id: int, data: TaskCreate, user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    await _owned_list_or_404(session, list_id, user)
    return await create_task(session, list_id, data)
