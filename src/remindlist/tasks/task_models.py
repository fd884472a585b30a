# src/remindlist/tasks/task_models.py

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

FAVORITE_TAG = "favorite"
UPDATED_TAG = "updated"


def now_ms() -> int:
    """Milliseconds since epoch (the unit used for last_update_time)."""
    return int(time.time() * 1000)


class Locale(StrEnum):
    BR = "pt-BR"
    EN = "en-US"

    @classmethod
    def parse(cls, raw: str | None, default: Locale | None = None) -> Locale:
        fallback = default or cls.BR
        if not raw:
            return fallback
        s = raw.strip().lower().replace("_", "-")
        aliases = {
            "pt-br": cls.BR,
            "pt": cls.BR,
            "br": cls.BR,
            "en-us": cls.EN,
            "en": cls.EN,
            "us": cls.EN,
        }
        return aliases.get(s, fallback)


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single reminder.

    Tasks are values: every change produces a new Task via dataclasses.replace,
    so a Task handed out in a snapshot is never modified afterwards.
    """

    id: str
    name: str
    is_done: bool = False
    tags: tuple[str, ...] = ()
    last_update_time: int | None = None

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @property
    def is_favorite(self) -> bool:
        return FAVORITE_TAG in self.tags

    # ---- wire form (camelCase, shared by the HTTP API and the SQLite tags column) ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "isDone": self.is_done,
            "tags": list(self.tags),
            "lastUpdateTime": self.last_update_time,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        if "id" not in data or data["id"] is None:
            raise ValueError("task payload has no id")
        raw_tags = data.get("tags") or []
        tags = tuple(str(t) for t in raw_tags) if isinstance(raw_tags, (list, tuple)) else ()
        raw_ts = data.get("lastUpdateTime")
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            is_done=bool(data.get("isDone", False)),
            tags=tags,
            last_update_time=int(raw_ts) if raw_ts is not None else None,
        )


@dataclass(frozen=True, slots=True)
class EditMode:
    id: str = ""
    is_editing: bool = False

    @classmethod
    def idle(cls) -> EditMode:
        return cls()

    @classmethod
    def editing(cls, task_id: str) -> EditMode:
        return cls(id=task_id, is_editing=True)

    def targets(self, task_id: str) -> bool:
        return self.is_editing and self.id == task_id


@dataclass(frozen=True, slots=True)
class FetchResult:
    """
    Result of gateway.fetch_all().

    row_count and pagination are whatever the store reports; nothing in the
    synchronizer trusts them (the displayed count is len(tasks)).
    """

    tasks: tuple[Task, ...] = ()
    row_count: int | None = None
    pagination: str | None = None


@dataclass(frozen=True, slots=True)
class TaskRow:
    task: Task
    position: int
    color: str

    @property
    def is_done(self) -> bool:
        return self.task.is_done


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view handed to the presentation layer after every publish."""

    tasks: tuple[Task, ...] = ()
    rows: tuple[TaskRow, ...] = ()
    edit_mode: EditMode = field(default_factory=EditMode.idle)
    total_count: int = 0
    name_buffer: str = ""

    def find(self, task_id: str) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None
