# src/remindlist/gateways/sqlite_store.py

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import sqlite3
import time
import uuid
from pathlib import Path

from ..tasks.errors import GatewayError, GatewayNotFoundError, GatewayValidationError
from ..tasks.task_models import FetchResult, Task

logger = logging.getLogger(__name__)


class SQLiteTaskGateway:
    """
    SQLite task store implementing the TaskGateway port.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Thread-safety:
    - each call opens its own SQLite connection
    - blocking work runs in a worker thread (asyncio.to_thread)
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SQLiteTaskGateway ready db=%s total=%s", self._db_path, self.count_tasks())

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    is_done INTEGER NOT NULL DEFAULT 0,
                    tags TEXT NOT NULL DEFAULT '[]',
                    last_update_time INTEGER,
                    created_at REAL NOT NULL
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("SQLiteTaskGateway migration: added column %s", name)

            add_col("is_done", "INTEGER NOT NULL DEFAULT 0")
            add_col("tags", "TEXT NOT NULL DEFAULT '[]'")
            add_col("last_update_time", "INTEGER")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_created ON tasks(created_at)")
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _tags_to_str(tags: tuple[str, ...]) -> str:
        return json.dumps(list(tags), ensure_ascii=False)

    @staticmethod
    def _str_to_tags(s: str | None) -> tuple[str, ...]:
        if not s:
            return ()
        try:
            val = json.loads(s)
        except ValueError:
            logger.warning("Corrupt tags column %r; treating as empty.", s)
            return ()
        return tuple(str(t) for t in val) if isinstance(val, list) else ()

    def _row_to_task(self, row: sqlite3.Row) -> Task:
        ts = row["last_update_time"]
        return Task(
            id=str(row["id"]),
            name=str(row["name"] or ""),
            is_done=bool(row["is_done"]),
            tags=self._str_to_tags(row["tags"]),
            last_update_time=int(ts) if ts is not None else None,
        )

    # ---- blocking implementation ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    def _create(self, name: str) -> Task:
        if not name or not name.strip():
            raise GatewayValidationError("name is required")

        task = Task(id=uuid.uuid4().hex, name=name.strip())
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO tasks(id, name, is_done, tags, last_update_time, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    task.id,
                    task.name,
                    int(task.is_done),
                    self._tags_to_str(task.tags),
                    task.last_update_time,
                    time.time(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        logger.debug("Task created id=%s", task.id)
        return task

    def _fetch_all(self) -> FetchResult:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM tasks ORDER BY created_at ASC, rowid ASC").fetchall()
        finally:
            conn.close()
        tasks = tuple(self._row_to_task(r) for r in rows)
        return FetchResult(tasks=tasks, row_count=len(tasks))

    def _update(self, task: Task) -> None:
        if not task.name or not task.name.strip():
            raise GatewayValidationError("name is required")

        conn = self._get_conn()
        try:
            cur = conn.execute(
                """
                UPDATE tasks
                SET name = ?, is_done = ?, tags = ?, last_update_time = ?
                WHERE id = ?
                """,
                (
                    task.name,
                    int(task.is_done),
                    self._tags_to_str(task.tags),
                    task.last_update_time,
                    task.id,
                ),
            )
            conn.commit()
            if cur.rowcount != 1:
                raise GatewayNotFoundError(task.id)
        finally:
            conn.close()
        logger.debug("Task updated id=%s done=%s tags=%s", task.id, task.is_done, task.tags)

    def _delete(self, task_id: str) -> None:
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
            conn.commit()
            if cur.rowcount != 1:
                raise GatewayNotFoundError(task_id)
        finally:
            conn.close()
        logger.debug("Task deleted id=%s", task_id)

    # ---- TaskGateway ----

    async def _run(self, fn, *args):
        try:
            return await asyncio.to_thread(fn, *args)
        except sqlite3.Error as e:
            raise GatewayError(f"sqlite error: {e}") from e

    async def create(self, name: str) -> Task:
        return await self._run(self._create, name)

    async def fetch_all(self) -> FetchResult:
        return await self._run(self._fetch_all)

    async def update(self, task: Task) -> None:
        await self._run(self._update, task)

    async def delete(self, task_id: str) -> None:
        await self._run(self._delete, task_id)

    async def aclose(self) -> None:
        """No persistent connections to close."""
        return
