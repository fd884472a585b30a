# tests/test_ordering.py

from __future__ import annotations

import pytest

from remindlist.tasks.ordering import (
    DONE_COLOR,
    PALETTE,
    build_rows,
    color_position,
    get_comparator,
    sort_tasks,
)
from remindlist.tasks.task_models import Task


def _tasks() -> list[Task]:
    return [
        Task(id="c", name="charlie", last_update_time=300),
        Task(id="a", name="Alpha", is_done=True, last_update_time=900),
        Task(id="b", name="bravo", tags=("favorite",), last_update_time=100),
        Task(id="e", name="echo"),
        Task(id="d", name="delta", last_update_time=300),
    ]


def test_sort_is_deterministic_and_does_not_mutate_input() -> None:
    tasks = _tasks()
    original = list(tasks)

    first = sort_tasks(tasks)
    second = sort_tasks(tasks)

    assert first == second
    assert tasks == original
    assert first is not tasks
    assert sorted(t.id for t in first) == sorted(t.id for t in tasks)


def test_favorites_first_order() -> None:
    ids = [t.id for t in sort_tasks(_tasks(), "favorites_first")]
    # favorite, then open by recency (ties by id), never-updated, then done.
    assert ids == ["b", "c", "d", "e", "a"]


def test_other_comparators() -> None:
    assert [t.id for t in sort_tasks(_tasks(), "recent_first")] == ["a", "c", "d", "b", "e"]
    assert [t.id for t in sort_tasks(_tasks(), "name")] == ["a", "b", "c", "d", "e"]
    assert [t.id for t in sort_tasks(_tasks(), "id")] == ["a", "b", "c", "d", "e"]


def test_unknown_comparator_raises() -> None:
    with pytest.raises(ValueError, match="unknown sort order"):
        get_comparator("random")


def test_rows_mark_done_tasks_and_cycle_palette() -> None:
    rows = build_rows(_tasks())

    assert [r.position for r in rows] == list(range(5))
    assert rows[-1].is_done and rows[-1].color == DONE_COLOR
    assert rows[0].color == PALETTE[0]
    assert color_position(len(PALETTE)) == PALETTE[0]
