from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tasklist.core.errors import ConstraintViolationError
from tasklist.models import Task, TaskStatus
from tasklist.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


async def create_task(session: AsyncSession, list_id: int, data: TaskCreate) -> Task:
    now = datetime.now(timezone.utc)
    task = Task(
        list_id=list_id,
        title=data.title,
        description=data.description,
        due_date=data.due_date.isoformat() if data.due_date else None,
        status=data.status or TaskStatus.pending,
        created_at=now,
        updated_at=now,
    )
    session.add(task)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise ConstraintViolationError(f"Cannot create task in list {list_id}") from exc
    await session.refresh(task)
    logger.info("Created task id=%s list_id=%s", task.id, list_id)
    return task


async def get_tasks_by_list_id(session: AsyncSession, list_id: int) -> List[Task]:
    result = await session.exec(
        select(Task)
        .where(Task.list_id == list_id)
        .order_by(Task.created_at.asc(), Task.id.asc())
    )
    return list(result.all())


async def get_task(session: AsyncSession, task_id: int) -> Optional[Task]:
    result = await session.exec(select(Task).where(Task.id == task_id))
    return result.first()


async def update_task(
    session: AsyncSession, task_id: int, updates: TaskUpdate
) -> Optional[Task]:
    # Only fields set on the payload change. Returns None for a missing task.
    task = await get_task(session, task_id)
    if task is None:
        return None

    changes = updates.model_dump(exclude_unset=True)
    if "title" in changes:
        task.title = changes["title"]
    if "description" in changes:
        task.description = changes["description"]
    if "due_date" in changes:
        due = changes["due_date"]
        task.due_date = due.isoformat() if due else None
    if "status" in changes:
        task.status = changes["status"]

    task.updated_at = datetime.now(timezone.utc)
    session.add(task)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise ConstraintViolationError(f"Cannot update task {task_id}") from exc
    await session.refresh(task)
    logger.info("Updated task id=%s fields=%s", task_id, sorted(changes))
    return task


async def delete_task(session: AsyncSession, task_id: int) -> None:
    conn = await session.connection()
    result = await conn.execute(delete(Task).where(Task.id == task_id))
    await session.commit()
    logger.info("Deleted task id=%s rows=%s", task_id, result.rowcount)
