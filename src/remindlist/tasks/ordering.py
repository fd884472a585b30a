# src/remindlist/tasks/ordering.py

from __future__ import annotations

"""
Render order for the task list.

Every comparator is a key function whose last element is the task id, so the
result is a total order and re-sorting an unchanged collection gives the same
sequence. Nothing here reorders or mutates the caller's collection.
"""

from collections.abc import Callable, Iterable
from typing import Any

from .task_models import Task, TaskRow

SortKey = Callable[[Task], tuple[Any, ...]]

DONE_COLOR = "lightgray"

# Row colours for open tasks, picked by position.
PALETTE: tuple[str, ...] = (
    "#f28b82",
    "#fbbc04",
    "#fff475",
    "#ccff90",
    "#a7ffeb",
    "#cbf0f8",
    "#aecbfa",
    "#d7aefb",
)


def _recency(task: Task) -> int:
    # Missing timestamps sort after every real one.
    ts = task.last_update_time
    return -ts if ts is not None else 1


def favorites_first(task: Task) -> tuple[Any, ...]:
    return (task.is_done, not task.is_favorite, _recency(task), task.id)


def recent_first(task: Task) -> tuple[Any, ...]:
    return (_recency(task), task.id)


def by_name(task: Task) -> tuple[Any, ...]:
    return (task.name.casefold(), task.id)


def by_id(task: Task) -> tuple[Any, ...]:
    return (task.id,)


COMPARATORS: dict[str, SortKey] = {
    "favorites_first": favorites_first,
    "recent_first": recent_first,
    "name": by_name,
    "id": by_id,
}

DEFAULT_COMPARATOR = "favorites_first"


def get_comparator(name: str | None) -> SortKey:
    key = (name or DEFAULT_COMPARATOR).strip().lower()
    try:
        return COMPARATORS[key]
    except KeyError:
        known = ", ".join(sorted(COMPARATORS))
        raise ValueError(f"unknown sort order {name!r}; expected one of: {known}") from None


def sort_tasks(tasks: Iterable[Task], comparator: SortKey | str | None = None) -> list[Task]:
    """Return a new, ordered list of tasks."""
    key = comparator if callable(comparator) else get_comparator(comparator)
    return sorted(tasks, key=key)


def color_position(index: int) -> str:
    return PALETTE[index % len(PALETTE)]


def build_rows(tasks: Iterable[Task], comparator: SortKey | str | None = None) -> tuple[TaskRow, ...]:
    rows: list[TaskRow] = []
    for i, task in enumerate(sort_tasks(tasks, comparator)):
        color = DONE_COLOR if task.is_done else color_position(i)
        rows.append(TaskRow(task=task, position=i, color=color))
    return tuple(rows)
