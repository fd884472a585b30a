# tests/fakes.py

from __future__ import annotations

import asyncio
from dataclasses import replace

from remindlist.tasks.errors import GatewayError, GatewayNotFoundError
from remindlist.tasks.task_models import FetchResult, Task


class FakeGateway:
    """
    In-memory TaskGateway used for synchronizer tests.

    - Records every call as (method, arg) for assertions
    - fail_on: method names that raise GatewayError on the next call
    - gates: method name -> asyncio.Event awaited before the call completes
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks: dict[str, Task] = {t.id: t for t in (tasks or [])}
        self.calls: list[tuple[str, object]] = []
        self.fail_on: set[str] = set()
        self.gates: dict[str, asyncio.Event] = {}
        self._next_id = 100

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)

    async def _enter(self, method: str, arg: object) -> None:
        self.calls.append((method, arg))
        gate = self.gates.get(method)
        if gate is not None:
            await gate.wait()
        if method in self.fail_on:
            self.fail_on.discard(method)
            raise GatewayError(f"{method} failed")

    async def create(self, name: str) -> Task:
        await self._enter("create", name)
        self._next_id += 1
        task = Task(id=str(self._next_id), name=name)
        self.tasks[task.id] = task
        return task

    async def fetch_all(self) -> FetchResult:
        await self._enter("fetch_all", None)
        # Deliberately report a bogus row count; callers must use len(tasks).
        return FetchResult(tasks=tuple(self.tasks.values()), row_count=999)

    async def update(self, task: Task) -> None:
        await self._enter("update", task)
        if task.id not in self.tasks:
            raise GatewayNotFoundError(task.id)
        self.tasks[task.id] = replace(task)

    async def delete(self, task_id: str) -> None:
        await self._enter("delete", task_id)
        if self.tasks.pop(task_id, None) is None:
            raise GatewayNotFoundError(task_id)


class FakeClock:
    """Deterministic millisecond clock; every call advances by step."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        self.now += self.step
        return self.now
