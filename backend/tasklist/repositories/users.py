from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tasklist.core.errors import UniqueConstraintError
from tasklist.models import User

logger = logging.getLogger(__name__)


async def create_user(session: AsyncSession, email: str, password_hash: str) -> User:
    user = User(email=email, password_hash=password_hash)
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise UniqueConstraintError("Email already registered") from exc
    await session.refresh(user)
    logger.info("Created user id=%s", user.id)
    return user


async def find_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.exec(select(User).where(User.email == email))
    return result.first()


async def get_user_by_id(session: AsyncSession, user_id: int) -> Optional[User]:
    result = await session.exec(select(User).where(User.id == user_id))
    return result.first()
