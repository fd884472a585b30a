# tests/test_sqlite_store.py

from __future__ import annotations

import sqlite3
from dataclasses import replace
from pathlib import Path

import pytest

from remindlist.gateways.sqlite_store import SQLiteTaskGateway
from remindlist.tasks.errors import GatewayNotFoundError, GatewayValidationError, TaskNotFoundError
from remindlist.tasks.synchronizer import OperationStatus, TaskListSynchronizer


@pytest.mark.asyncio
async def test_create_fetch_update_delete(tmp_path: Path) -> None:
    store = SQLiteTaskGateway(tmp_path / "tasks.sqlite3")

    t1 = await store.create("Buy milk")
    t2 = await store.create("  Call mom  ")
    assert t1.id != t2.id
    assert t1.is_done is False and t1.tags == ()
    assert t2.name == "Call mom"

    fetched = await store.fetch_all()
    assert [t.id for t in fetched.tasks] == [t1.id, t2.id]
    assert fetched.row_count == 2

    await store.update(replace(t1, name="Buy oat milk", is_done=True, tags=("favorite", "updated"), last_update_time=42))
    got = {t.id: t for t in (await store.fetch_all()).tasks}[t1.id]
    assert got.name == "Buy oat milk"
    assert got.is_done is True
    assert got.tags == ("favorite", "updated")
    assert got.last_update_time == 42

    await store.delete(t2.id)
    assert [t.id for t in (await store.fetch_all()).tasks] == [t1.id]


@pytest.mark.asyncio
async def test_missing_ids_and_blank_names_raise(tmp_path: Path) -> None:
    store = SQLiteTaskGateway(tmp_path / "tasks.sqlite3")
    task = await store.create("x")
    await store.delete(task.id)

    with pytest.raises(GatewayNotFoundError):
        await store.update(task)
    with pytest.raises(TaskNotFoundError):
        await store.delete(task.id)
    with pytest.raises(GatewayValidationError):
        await store.create("   ")


def test_migrates_old_schema(tmp_path: Path) -> None:
    db = tmp_path / "old.sqlite3"
    conn = sqlite3.connect(db)
    conn.execute("CREATE TABLE tasks (id TEXT PRIMARY KEY, name TEXT NOT NULL, created_at REAL NOT NULL)")
    conn.execute("INSERT INTO tasks(id, name, created_at) VALUES ('old', 'legacy', 1.0)")
    conn.commit()
    conn.close()

    store = SQLiteTaskGateway(db)
    assert store.count_tasks() == 1


@pytest.mark.asyncio
async def test_synchronizer_end_to_end_with_sqlite(tmp_path: Path) -> None:
    store = SQLiteTaskGateway(tmp_path / "tasks.sqlite3")
    sync = TaskListSynchronizer(store)

    r = await sync.add("Buy milk")
    assert r.status == OperationStatus.APPLIED
    task_id = r.snapshot.tasks[0].id

    r = await sync.toggle_favorite(task_id)
    assert r.snapshot.find(task_id).is_favorite

    r = await sync.complete(task_id)
    assert r.snapshot.rows[0].is_done

    r = await sync.delete(task_id)
    assert r.snapshot.total_count == 0
