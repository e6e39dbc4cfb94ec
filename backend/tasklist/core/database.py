from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from .config import settings
from .errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with foreign keys off; ON DELETE CASCADE needs them per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Store:
    # One Store per unit of work (request, test); always pair with close().

    def __init__(self, db_path: str | Path | None = None) -> None:
        self.db_path = Path(db_path or settings.database_path)
        self._engine: AsyncEngine = create_async_engine(
            f"sqlite+aiosqlite:///{self.db_path}", echo=False
        )
        event.listen(self._engine.sync_engine, "connect", _enable_foreign_keys)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise StoreUnavailableError(f"Store {self.db_path} is closed")

    async def initialize(self) -> None:
        self._ensure_open()
        # IMPORTANT: Import models so metadata contains tables
        import tasklist.models  # noqa: F401

        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        except (OSError, SQLAlchemyError) as exc:
            logger.error("Store initialization failed db=%s: %s", self.db_path, exc)
            raise StoreUnavailableError(
                f"Cannot initialize store at {self.db_path}"
            ) from exc
        logger.debug("Store ready db=%s", self.db_path)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._engine.dispose()
        logger.debug("Store closed db=%s", self.db_path)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        # IntegrityError is left to the repositories, which know which constraint it was.
        self._ensure_open()
        try:
            async with AsyncSession(self._engine, expire_on_commit=False) as session:
                yield session
        except IntegrityError:
            raise
        except (OSError, SQLAlchemyError) as exc:
            raise StoreUnavailableError(f"Store {self.db_path} failed: {exc}") from exc
