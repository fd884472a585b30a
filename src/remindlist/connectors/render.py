# src/remindlist/connectors/render.py

from __future__ import annotations

from datetime import datetime

from ..tasks.task_models import FAVORITE_TAG, UPDATED_TAG, Locale, Snapshot, TaskRow
from .strings import t


def _fmt_ms(ms: int | None) -> str:
    if ms is None:
        return ""
    return datetime.fromtimestamp(ms / 1000).astimezone().strftime("%Y-%m-%d %H:%M")


def render_row(row: TaskRow, *, number: int, editing_id: str = "") -> str:
    task = row.task
    check = "[x]" if task.is_done else "[ ]"
    star = "*" if FAVORITE_TAG in task.tags else " "
    line = f"{number:>3}. {check} {star} {task.name}"

    extras: list[str] = []
    if not task.is_done and task.last_update_time is not None:
        extras.append(_fmt_ms(task.last_update_time))
    if UPDATED_TAG in task.tags:
        extras.append("edited")
    if extras:
        line += f"  ({', '.join(extras)})"
    if task.id == editing_id:
        line = f"{line}  <- editing"
    return line


def render_snapshot(snapshot: Snapshot, locale: Locale) -> str:
    lines: list[str] = []

    mode = snapshot.edit_mode
    if mode.is_editing:
        edited = snapshot.find(mode.id)
        lines.append(t("EDIT_MODE_ON", locale))
        lines.append(f"  {mode.id}: {edited.name if edited else t('NOT_FOUND', locale)}")

    if snapshot.total_count:
        lines.append(f"{t('LIST_TITLE', locale)} ({snapshot.total_count})")
    else:
        lines.append(t("EMPTY_LIST", locale))

    for row in snapshot.rows:
        lines.append(render_row(row, number=row.position + 1, editing_id=mode.id if mode.is_editing else ""))
    return "\n".join(lines)
