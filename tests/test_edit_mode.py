# tests/test_edit_mode.py

from __future__ import annotations

import pytest

from remindlist.tasks.edit_mode import EditModeController
from remindlist.tasks.errors import EditModeConflictError
from remindlist.tasks.task_models import EditMode


def test_starts_idle_and_permits_everything() -> None:
    ctl = EditModeController()
    assert ctl.mode == EditMode.idle()
    assert ctl.permits("1")
    assert ctl.permits("2")


def test_begin_locks_other_tasks() -> None:
    ctl = EditModeController()
    ctl.begin("1")

    assert ctl.mode == EditMode(id="1", is_editing=True)
    assert ctl.permits("1")
    assert not ctl.permits("2")

    with pytest.raises(EditModeConflictError):
        ctl.begin("2")
    with pytest.raises(EditModeConflictError):
        ctl.finish("2")
    assert ctl.mode.id == "1"


def test_begin_same_task_is_idempotent_and_finish_returns_to_idle() -> None:
    ctl = EditModeController()
    ctl.begin("1")
    ctl.begin("1")
    assert ctl.mode.id == "1"

    assert ctl.finish("1") == EditMode.idle()
    # Finishing while idle is a no-op.
    assert ctl.finish("1") == EditMode.idle()
