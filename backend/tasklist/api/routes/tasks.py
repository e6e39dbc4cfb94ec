from fastapi import APIRouter, Depends, HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from tasklist.api.deps import get_current_user, get_session
from tasklist.models import Task, User
from tasklist.repositories import delete_task, get_task, get_task_list, update_task
from tasklist.schemas.task import TaskOut, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


async def _owned_task_or_404(session: AsyncSession, task_id: int, user: User) -> Task:
    task = await get_task(session, task_id)
    if not task or not await get_task_list(session, task.list_id, user.id):
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.patch("/{task_id}", response_model=TaskOut)
async def patch_task(task_id: int, data: TaskUpdate, user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    await _owned_task_or_404(session, task_id, user)
    task = await update_task(session, task_id, data)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.delete("/{task_id}", status_code=204)
async def remove_task(task_id: int, user: User = Depends(get_current_user), session: AsyncSession = Depends(get_session)):
    await _owned_task_or_404(session, task_id, user)
    await delete_task(session, task_id)
    return None
