import asyncio
from datetime import date

import pytest
from pydantic import ValidationError

from tasklist.core.errors import ConstraintViolationError
from tasklist.models import TaskStatus
from tasklist.repositories import (
    create_task,
    create_task_list,
    create_user,
    delete_task,
    get_task,
    get_tasks_by_list_id,
    update_task,
)
from tasklist.schemas.task import TaskCreate, TaskUpdate


@pytest.mark.asyncio
async def test_create_task_with_all_fields(session, task_list):
    task = await create_task(
        session,
        task_list.id,
        TaskCreate(
            title="Test Task",
            description="Test Description",
            due_date="2024-12-31",
            status="in_progress",
        ),
    )

    assert task.id is not None
    assert task.list_id == task_list.id
    assert task.title == "Test Task"
    assert task.description == "Test Description"
    assert task.due_date == "2024-12-31"
    assert task.status == TaskStatus.in_progress
    assert task.created_at == task.updated_at


@pytest.mark.asyncio
async def test_create_task_defaults_to_pending(session, task_list):
    task = await create_task(session, task_list.id, TaskCreate(title="No status"))

    assert task.status == TaskStatus.pending
    assert task.description is None
    assert task.due_date is None


@pytest.mark.asyncio
async def test_scenario_user_list_task(session):
    user = await create_user(session, "a@x.com", "h1")
    work = await create_task_list(session, user.id, "Work")
    task = await create_task(session, work.id, TaskCreate(title="Write spec"))

    assert task.status == "pending"
    tasks = await get_tasks_by_list_id(session, work.id)
    assert len(tasks) == 1
    assert tasks[0].title == "Write spec"


@pytest.mark.asyncio
async def test_tasks_returned_in_creation_order(session, task_list):
    await create_task(session, task_list.id, TaskCreate(title="Task 1", status="pending"))
    await create_task(session, task_list.id, TaskCreate(title="Task 2", status="completed"))

    tasks = await get_tasks_by_list_id(session, task_list.id)

    assert [t.title for t in tasks] == ["Task 1", "Task 2"]
    assert [t.status for t in tasks] == [TaskStatus.pending, TaskStatus.completed]


@pytest.mark.asyncio
async def test_create_task_in_missing_list(session, user):
    with pytest.raises(ConstraintViolationError):
        await create_task(session, 999, TaskCreate(title="Orphan"))


@pytest.mark.asyncio
async def test_update_status_only_leaves_other_fields(session, task_list):
    task = await create_task(
        session,
        task_list.id,
        TaskCreate(title="Original", description="desc", due_date=date(2025, 1, 15)),
    )
    before = task.updated_at
    await asyncio.sleep(0.01)

    updated = await update_task(session, task.id, TaskUpdate(status="completed"))

    assert updated is not None
    assert updated.status == TaskStatus.completed
    assert updated.title == "Original"
    assert updated.description == "desc"
    assert updated.due_date == "2025-01-15"
    assert updated.updated_at > before
    assert updated.created_at == task.created_at


@pytest.mark.asyncio
async def test_update_title_and_status(session, task_list):
    task = await create_task(session, task_list.id, TaskCreate(title="Original"))

    updated = await update_task(
        session, task.id, TaskUpdate(title="Updated Title", status="completed")
    )

    assert updated.title == "Updated Title"
    assert updated.status == TaskStatus.completed


@pytest.mark.asyncio
async def test_update_can_clear_optional_fields(session, task_list):
    task = await create_task(
        session, task_list.id, TaskCreate(title="T", description="d", due_date="2025-02-01")
    )

    updated = await update_task(session, task.id, TaskUpdate(description=None, due_date=None))

    assert updated.description is None
    assert updated.due_date is None
    assert updated.title == "T"


@pytest.mark.asyncio
async def test_update_missing_task_returns_none(session):
    assert await update_task(session, 4242, TaskUpdate(title="x")) is None


def test_update_rejects_null_title():
    with pytest.raises(ValidationError):
        TaskUpdate(title=None)


def test_create_rejects_unknown_status():
    with pytest.raises(ValidationError):
        TaskCreate(title="x", status="done")


@pytest.mark.asyncio
async def test_delete_task(session, task_list):
    task = await create_task(session, task_list.id, TaskCreate(title="To Delete"))

    await delete_task(session, task.id)

    assert await get_tasks_by_list_id(session, task_list.id) == []
    assert await get_task(session, task.id) is None


@pytest.mark.asyncio
async def test_delete_task_is_idempotent(session, task_list):
    task = await create_task(session, task_list.id, TaskCreate(title="Once"))

    await delete_task(session, task.id)
    await delete_task(session, task.id)
    await delete_task(session, 98765)


@pytest.mark.asyncio
async def test_reads_do_not_touch_updated_at(session, task_list):
    task = await create_task(session, task_list.id, TaskCreate(title="Read me"))
    before = task.updated_at
    await asyncio.sleep(0.01)

    listed = await get_tasks_by_list_id(session, task_list.id)
    fetched = await get_task(session, task.id)

    assert listed[0].updated_at == before
    assert fetched.updated_at == before
