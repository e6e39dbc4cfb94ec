from typing import AsyncIterator, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from tasklist.core.database import Store
from tasklist.core.security import extract_token_from_header, verify_token
from tasklist.models import User
from tasklist.repositories import get_user_by_id


async def get_store() -> AsyncIterator[Store]:
    """One store handle per request, closed exactly once on every exit path."""
    store = Store()
    try:
        await store.initialize()
        yield store
    finally:
        await store.close()


async def get_session(store: Store = Depends(get_store)) -> AsyncIterator[AsyncSession]:
    async with store.session() as session:
        yield session


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    session: AsyncSession = Depends(get_session),
) -> User:
    token = extract_token_from_header(authorization)
    if token is None:
        raise _unauthorized()

    claims = verify_token(token)
    if claims is None:
        raise _unauthorized()

    user = await get_user_by_id(session, claims.user_id)
    if user is None or user.email != claims.email:
        raise _unauthorized()

    return user
