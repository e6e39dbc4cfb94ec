from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tasklist.core.errors import ConstraintViolationError
from tasklist.models import TaskList

logger = logging.getLogger(__name__)


async def create_task_list(session: AsyncSession, user_id: int, name: str) -> TaskList:
    # A dangling user_id is rejected by the foreign key, not looked up first.
    task_list = TaskList(user_id=user_id, name=name)
    session.add(task_list)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise ConstraintViolationError(f"Cannot create list for user {user_id}") from exc
    await session.refresh(task_list)
    logger.info("Created task list id=%s user_id=%s", task_list.id, user_id)
    return task_list


async def get_task_lists_by_user_id(session: AsyncSession, user_id: int) -> List[TaskList]:
    result = await session.exec(
        select(TaskList)
        .where(TaskList.user_id == user_id)
        .order_by(TaskList.created_at.asc(), TaskList.id.asc())
    )
    return list(result.all())


async def get_task_list(
    session: AsyncSession, list_id: int, user_id: int
) -> Optional[TaskList]:
    result = await session.exec(
        select(TaskList).where(TaskList.id == list_id, TaskList.user_id == user_id)
    )
    return result.first()


async def delete_task_list(session: AsyncSession, list_id: int, user_id: int) -> None:
    # Ownership is part of the DELETE predicate; tasks go via ON DELETE CASCADE.
    conn = await session.connection()
    result = await conn.execute(
        delete(TaskList).where(TaskList.id == list_id, TaskList.user_id == user_id)
    )
    await session.commit()
    logger.info(
        "Deleted task list id=%s user_id=%s rows=%s", list_id, user_id, result.rowcount
    )
