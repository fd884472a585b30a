# src/remindlist/core/context.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.synchronizer import OperationResult, TaskListSynchronizer
from ..tasks.task_models import EditMode, Locale


@dataclass(slots=True)
class AppSettingsContext:
    """
    Settings handed explicitly to the presentation layer.

    Edit mode is not duplicated here: is_editing and toggle_editing read and
    drive the synchronizer's own controller.
    """

    locale: Locale
    synchronizer: TaskListSynchronizer

    @property
    def is_editing(self) -> EditMode:
        return self.synchronizer.edit_mode

    def toggle_editing(self, task_id: str) -> OperationResult:
        """Begin editing task_id, or cancel if it is the task already being edited."""
        if self.synchronizer.edit_mode.targets(task_id):
            return self.synchronizer.cancel_edit()
        return self.synchronizer.begin_edit(task_id)

    def set_locale(self, locale: Locale) -> None:
        self.locale = locale
