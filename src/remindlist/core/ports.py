# src/remindlist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The synchronizer depends on these Protocols instead of concrete stores, so the
SQLite store, the HTTP client and the in-memory test fake are interchangeable.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import FetchResult, Snapshot, Task


class TaskGateway(Protocol):
    """
    Remote task store.

    Implementations raise GatewayError (or a subclass) on failure. update()
    replaces the whole stored task; it is not a field-level patch.
    """

    async def create(self, name: str) -> Task: ...

    async def fetch_all(self) -> FetchResult: ...

    async def update(self, task: Task) -> None: ...

    async def delete(self, task_id: str) -> None: ...


SnapshotListener = Callable[[Snapshot], None]
