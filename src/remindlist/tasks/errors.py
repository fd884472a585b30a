# src/remindlist/tasks/errors.py

from __future__ import annotations


class RemindListError(Exception):
    """Base class for all errors raised by remindlist."""


class TaskNotFoundError(RemindListError):
    def __init__(self, task_id: str, message: str | None = None) -> None:
        self.task_id = task_id
        super().__init__(message or f"task not found: {task_id!r}")


class EditModeConflictError(RemindListError):
    """An intent targeted a task other than the one being edited."""

    def __init__(self, task_id: str, editing_id: str) -> None:
        self.task_id = task_id
        self.editing_id = editing_id
        super().__init__(f"task {task_id!r} is locked: task {editing_id!r} is being edited")


class InvalidTransitionError(RemindListError):
    """E.g. completing a task that is already done."""


# ---- gateway side ----


class GatewayError(RemindListError):
    """Any failure reported by a TaskGateway implementation."""


class GatewayNotFoundError(GatewayError, TaskNotFoundError):
    def __init__(self, task_id: str, message: str | None = None) -> None:
        TaskNotFoundError.__init__(self, task_id, message)


class GatewayTimeoutError(GatewayError):
    pass


class GatewayValidationError(GatewayError):
    pass
