# src/remindlist/tasks/edit_mode.py

from __future__ import annotations

import logging

from .errors import EditModeConflictError
from .task_models import EditMode

logger = logging.getLogger(__name__)


class EditModeController:
    """
    Tracks the single task (if any) currently being edited.

    States:
    - Idle            (EditMode(id="", is_editing=False))
    - Editing(task_id)

    Only the edited task may receive intents while Editing; anything aimed at
    another task raises EditModeConflictError and leaves the state as it was.
    """

    def __init__(self) -> None:
        self._mode = EditMode.idle()

    @property
    def mode(self) -> EditMode:
        return self._mode

    @property
    def is_editing(self) -> bool:
        return self._mode.is_editing

    def permits(self, task_id: str) -> bool:
        return not self._mode.is_editing or self._mode.id == task_id

    def check(self, task_id: str) -> None:
        if not self.permits(task_id):
            raise EditModeConflictError(task_id, self._mode.id)

    def begin(self, task_id: str) -> EditMode:
        self.check(task_id)
        if not self._mode.targets(task_id):
            self._mode = EditMode.editing(task_id)
            logger.debug("Edit mode -> editing id=%s", task_id)
        return self._mode

    def finish(self, task_id: str | None = None) -> EditMode:
        """
        Return to Idle.

        With task_id, only the edited task may end edit mode. Finishing while
        already Idle is a no-op.
        """
        if not self._mode.is_editing:
            return self._mode
        if task_id is not None:
            self.check(task_id)
        logger.debug("Edit mode -> idle (was id=%s)", self._mode.id)
        self._mode = EditMode.idle()
        return self._mode
