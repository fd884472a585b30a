# src/remindlist/tasks/synchronizer.py

from __future__ import annotations

"""
Task list synchronizer.

Every intent runs the same pipeline:
- compose the new Task value from the cached one,
- submit it to the gateway,
- re-fetch the whole collection and replace the cache,
- publish a new Snapshot to subscribers.

The cache is never patched optimistically. A failed gateway call leaves cache,
edit mode and name buffer exactly as they were and comes back as a FAILED
OperationResult instead of an exception.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from enum import StrEnum

from ..core.ports import SnapshotListener, TaskGateway
from .edit_mode import EditModeController
from .errors import InvalidTransitionError, RemindListError, TaskNotFoundError
from .ordering import SortKey, build_rows, get_comparator
from .task_models import FAVORITE_TAG, UPDATED_TAG, EditMode, Snapshot, Task, now_ms

logger = logging.getLogger(__name__)


class OperationStatus(StrEnum):
    APPLIED = "applied"
    NOOP = "noop"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class OperationResult:
    status: OperationStatus
    snapshot: Snapshot
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status in (OperationStatus.APPLIED, OperationStatus.NOOP)


def with_tag(tags: tuple[str, ...], tag: str) -> tuple[str, ...]:
    return tags if tag in tags else (*tags, tag)


def without_tag(tags: tuple[str, ...], tag: str) -> tuple[str, ...]:
    return tuple(t for t in tags if t != tag)


def toggle_tag(tags: tuple[str, ...], tag: str) -> tuple[str, ...]:
    return without_tag(tags, tag) if tag in tags else with_tag(tags, tag)


class TaskListSynchronizer:
    def __init__(
        self,
        gateway: TaskGateway,
        *,
        comparator: SortKey | str | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._gateway = gateway
        self._sort_key = comparator if callable(comparator) else get_comparator(comparator)
        self._clock = clock

        self._edit = EditModeController()
        self._tasks: tuple[Task, ...] = ()
        self._name_buffer = ""
        self._listeners: list[SnapshotListener] = []
        self._snapshot = self._build_snapshot()

    # ---- read side ----

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def edit_mode(self) -> EditMode:
        return self._edit.mode

    @property
    def name_buffer(self) -> str:
        return self._name_buffer

    def permits(self, task_id: str) -> bool:
        return self._edit.permits(task_id)

    def subscribe(self, listener: SnapshotListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SnapshotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ---- intents without gateway calls ----

    def set_name_buffer(self, text: str) -> Snapshot:
        self._name_buffer = text
        return self._publish()

    def begin_edit(self, task_id: str) -> OperationResult:
        try:
            task = self._find(task_id)
            self._edit.begin(task_id)
        except RemindListError as e:
            return self._reject("begin_edit", e)
        self._name_buffer = task.name
        return self._done(OperationStatus.APPLIED)

    def cancel_edit(self) -> OperationResult:
        if not self._edit.is_editing:
            return self._done(OperationStatus.NOOP, publish=False)
        self._edit.finish()
        self._name_buffer = ""
        return self._done(OperationStatus.APPLIED)

    # ---- mutating intents ----

    async def refresh(self) -> OperationResult:
        """Fetch the collection without mutating anything (initial load)."""
        return await self._reload("refresh")

    async def add(self, name: str | None = None) -> OperationResult:
        """
        Submit the name buffer.

        While editing this commits the edit of the edited task; otherwise it
        creates a new task. An empty buffer is a no-op.
        """
        if name is not None:
            self._name_buffer = name
        text = self._name_buffer.strip()
        if not text:
            return self._done(OperationStatus.NOOP, publish=False)

        if self._edit.is_editing:
            return await self.commit_edit()

        def after() -> None:
            self._name_buffer = ""

        return await self._mutate("create", lambda: self._gateway.create(text), after)

    async def commit_edit(self, name: str | None = None) -> OperationResult:
        if name is not None:
            self._name_buffer = name
        mode = self._edit.mode
        if not mode.is_editing:
            return self._reject("commit_edit", InvalidTransitionError("no task is being edited"))
        text = self._name_buffer.strip()
        if not text:
            return self._done(OperationStatus.NOOP, publish=False)
        try:
            current = self._find(mode.id)
        except TaskNotFoundError as e:
            return self._reject("commit_edit", e)

        edited = replace(
            current,
            name=text,
            last_update_time=self._clock(),
            tags=with_tag(current.tags, UPDATED_TAG),
        )
        return await self._mutate(
            "update(edit)",
            lambda: self._gateway.update(edited),
            lambda: self._leave_edit(mode.id),
        )

    async def delete(self, task_id: str) -> OperationResult:
        try:
            self._find(task_id)
            self._edit.check(task_id)
        except RemindListError as e:
            return self._reject("delete", e)
        return await self._mutate(
            "delete",
            lambda: self._gateway.delete(task_id),
            lambda: self._leave_edit(task_id),
        )

    async def toggle_favorite(self, task_id: str) -> OperationResult:
        try:
            current = self._find(task_id)
            self._edit.check(task_id)
        except RemindListError as e:
            return self._reject("toggle_favorite", e)
        toggled = replace(current, tags=toggle_tag(current.tags, FAVORITE_TAG))
        return await self._mutate("update(favorite)", lambda: self._gateway.update(toggled))

    async def complete(self, task_id: str) -> OperationResult:
        try:
            current = self._find(task_id)
            self._edit.check(task_id)
            if current.is_done:
                raise InvalidTransitionError(f"task {task_id!r} is already done")
        except RemindListError as e:
            return self._reject("complete", e)
        done = replace(current, is_done=True, last_update_time=self._clock())
        return await self._mutate("update(complete)", lambda: self._gateway.update(done))

    async def restore(self, task_id: str) -> OperationResult:
        try:
            current = self._find(task_id)
            self._edit.check(task_id)
            if not current.is_done:
                raise InvalidTransitionError(f"task {task_id!r} is not done")
        except RemindListError as e:
            return self._reject("restore", e)
        restored = replace(current, is_done=False, last_update_time=self._clock())
        return await self._mutate(
            "update(restore)",
            lambda: self._gateway.update(restored),
            lambda: self._leave_edit(task_id),
        )

    # ---- internals ----

    def _find(self, task_id: str) -> Task:
        for t in self._tasks:
            if t.id == task_id:
                return t
        raise TaskNotFoundError(task_id)

    def _leave_edit(self, task_id: str) -> None:
        # An edit session started on another task while this call was in flight is kept.
        mode = self._edit.mode
        if mode.is_editing and mode.id != task_id:
            logger.debug("Keeping edit session id=%s after call on id=%s", mode.id, task_id)
            return
        self._edit.finish()
        self._name_buffer = ""

    async def _mutate(
        self,
        label: str,
        call: Callable[[], Awaitable[object]],
        after: Callable[[], None] | None = None,
    ) -> OperationResult:
        try:
            await call()
        except Exception as e:
            logger.warning("Gateway %s failed: %s", label, e, exc_info=True)
            return self._done(OperationStatus.FAILED, error=e, publish=False)

        if after is not None:
            after()
        return await self._reload(label)

    async def _reload(self, label: str) -> OperationResult:
        try:
            fetched = await self._gateway.fetch_all()
        except Exception as e:
            logger.warning("Gateway fetch_all after %s failed: %s", label, e, exc_info=True)
            # The mutation itself may have succeeded; publish edit-mode/buffer changes.
            return self._done(OperationStatus.FAILED, error=e)

        self._tasks = tuple(fetched.tasks)
        logger.info("Task list reloaded after %s: %d tasks", label, len(self._tasks))
        return self._done(OperationStatus.APPLIED)

    def _reject(self, label: str, error: RemindListError) -> OperationResult:
        logger.info("Rejected %s: %s", label, error)
        return self._done(OperationStatus.REJECTED, error=error, publish=False)

    def _done(
        self,
        status: OperationStatus,
        *,
        error: Exception | None = None,
        publish: bool = True,
    ) -> OperationResult:
        snap = self._publish() if publish else self._snapshot
        return OperationResult(status=status, snapshot=snap, error=error)

    def _build_snapshot(self) -> Snapshot:
        return Snapshot(
            tasks=self._tasks,
            rows=build_rows(self._tasks, self._sort_key),
            edit_mode=self._edit.mode,
            total_count=len(self._tasks),
            name_buffer=self._name_buffer,
        )

    def _publish(self) -> Snapshot:
        self._snapshot = self._build_snapshot()
        for listener in list(self._listeners):
            try:
                listener(self._snapshot)
            except Exception:
                logger.exception("Snapshot listener crashed: %r", listener)
        return self._snapshot
