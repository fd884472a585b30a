# tests/test_context.py

from __future__ import annotations

import pytest

from remindlist.core.state import AppState
from remindlist.tasks.synchronizer import OperationStatus
from remindlist.tasks.task_models import EditMode


@pytest.mark.asyncio
async def test_toggle_editing_begins_then_cancels(state: AppState) -> None:
    await state.synchronizer.refresh()
    ctx = state.context

    first = ctx.toggle_editing("1")
    assert first.status == OperationStatus.APPLIED
    assert ctx.is_editing == EditMode(id="1", is_editing=True)
    assert state.synchronizer.name_buffer == "Buy milk"

    second = ctx.toggle_editing("1")
    assert second.status == OperationStatus.APPLIED
    assert ctx.is_editing == EditMode.idle()
    assert state.synchronizer.name_buffer == ""
