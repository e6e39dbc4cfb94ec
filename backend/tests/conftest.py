from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tasklist.core.config import settings
from tasklist.core.database import Store
from tasklist.repositories import create_task_list, create_user


@pytest.fixture()
async def store(tmp_path: Path):
    """A freshly initialized store in a per-test file."""
    store = Store(tmp_path / "tasks.db")
    await store.initialize()
    try:
        yield store
    finally:
        await store.close()


@pytest.fixture()
async def session(store: Store):
    async with store.session() as session:
        yield session


@pytest.fixture()
async def user(session):
    return await create_user(session, "a@x.com", "h1")


@pytest.fixture()
async def task_list(session, user):
    return await create_task_list(session, user.id, "Work")


@pytest.fixture()
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    TestClient against the real app, with the store pointed at tmp_path.

    Every request opens and closes its own Store on that file.
    """
    monkeypatch.setattr(settings, "database_path", str(tmp_path / "api.db"))
    monkeypatch.setattr(settings, "jwt_secret", "test-secret")

    from main import app

    with TestClient(app) as c:
        yield c
