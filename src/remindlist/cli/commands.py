# src/remindlist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..connectors.render import render_snapshot
from ..core.state import AppState
from ..tasks.synchronizer import OperationResult, OperationStatus
from ..tasks.task_models import Locale

CommandHandler = Callable[[AppState, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return await handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_task_id(state: AppState, ref: str) -> str | None:
    """
    Map a user reference to a task id.

    Accepts the 1-based row number of the ordered list, or a task id.
    """
    snap = state.synchronizer.snapshot
    if ref.isdigit():
        idx = int(ref) - 1
        if 0 <= idx < len(snap.rows):
            return snap.rows[idx].task.id
    if snap.find(ref) is not None:
        return ref
    return None


def describe_result(state: AppState, result: OperationResult) -> str:
    if result.status == OperationStatus.APPLIED:
        return render_snapshot(result.snapshot, state.context.locale)
    if result.status == OperationStatus.NOOP:
        return "Nothing to do."
    if result.status == OperationStatus.REJECTED:
        return f"Rejected: {result.error}"
    return f"Store error: {result.error}"


async def _with_task(
    state: AppState,
    args: list[str],
    usage: str,
    op: Callable[[str], Awaitable[OperationResult]],
) -> str:
    if not args:
        return usage
    task_id = resolve_task_id(state, args[0])
    if task_id is None:
        return f"No task {args[0]!r}. Use /list to see row numbers."
    return describe_result(state, await op(task_id))


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list          -> show the cached list
    /list refresh  -> re-fetch from the store first
    """
    if args and args[0].lower() in ("refresh", "r"):
        return describe_result(state, await state.synchronizer.refresh())
    return render_snapshot(state.synchronizer.snapshot, state.context.locale)


async def cmd_add(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    return describe_result(state, await state.synchronizer.add(text))


async def cmd_edit(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /edit <n>"
    task_id = resolve_task_id(state, args[0])
    if task_id is None:
        return f"No task {args[0]!r}. Use /list to see row numbers."
    result = state.context.toggle_editing(task_id)
    if result.ok and result.snapshot.edit_mode.is_editing:
        return f"Editing: {result.snapshot.name_buffer}\nType the new text (or /save <text>, /cancel)."
    return describe_result(state, result)


async def cmd_cancel(state: AppState, args: list[str]) -> str:
    return describe_result(state, state.synchronizer.cancel_edit())


async def cmd_save(state: AppState, args: list[str]) -> str:
    text = " ".join(args) if args else None
    return describe_result(state, await state.synchronizer.commit_edit(text))


async def cmd_delete(state: AppState, args: list[str]) -> str:
    return await _with_task(state, args, "Usage: /del <n>", state.synchronizer.delete)


async def cmd_favorite(state: AppState, args: list[str]) -> str:
    return await _with_task(state, args, "Usage: /fav <n>", state.synchronizer.toggle_favorite)


async def cmd_done(state: AppState, args: list[str]) -> str:
    return await _with_task(state, args, "Usage: /done <n>", state.synchronizer.complete)


async def cmd_restore(state: AppState, args: list[str]) -> str:
    return await _with_task(state, args, "Usage: /restore <n>", state.synchronizer.restore)


async def cmd_locale(state: AppState, args: list[str]) -> str:
    """
    /locale        -> show current locale
    /locale pt|en  -> switch list strings
    """
    if not args:
        return f"Locale is {state.context.locale.value}. Use /locale pt or /locale en."
    state.context.set_locale(Locale.parse(args[0], state.context.locale))
    logger.debug("Locale switched to %s", state.context.locale.value)
    return f"Locale set to {state.context.locale.value}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the list: /list | /list refresh.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a reminder (commits the edit while editing).")
registry.register("edit", cmd_edit, help_text="Start/stop editing a reminder: /edit <n>.")
registry.register("cancel", cmd_cancel, help_text="Leave edit mode without saving.")
registry.register("save", cmd_save, help_text="Save the edited reminder: /save [text].")
registry.register("del", cmd_delete, help_text="Delete a reminder: /del <n>.", aliases=["rm"])
registry.register("fav", cmd_favorite, help_text="Toggle favorite: /fav <n>.")
registry.register("done", cmd_done, help_text="Mark a reminder done: /done <n>.")
registry.register("restore", cmd_restore, help_text="Reopen a done reminder: /restore <n>.")
registry.register("locale", cmd_locale, help_text="Switch language: /locale pt | /locale en.")
