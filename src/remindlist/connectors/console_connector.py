# src/remindlist/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..cli.commands import describe_result
from ..cli.commands import registry as command_registry
from ..connectors.render import render_snapshot
from ..core.state import AppState
from .strings import t

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


async def handle_line(state: AppState, line: str) -> str | None:
    """
    One console line -> reply text.

    Slash commands go to the registry. Plain text is the "type and press Enter"
    path: it replaces the name buffer and submits it (add, or commit while editing).
    """
    line = line.strip()
    if not line:
        return None
    reply = await command_registry.handle(state, line)
    if reply is not None:
        return reply
    return describe_result(state, await state.synchronizer.add(line))


async def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (locale=%s).", state.context.locale.value)
    _print_ts("[CONSOLE] Type a reminder and press Enter. Use /help for commands, /exit to quit.\n")

    initial = await state.synchronizer.refresh()
    if initial.ok:
        print(render_snapshot(initial.snapshot, state.context.locale))
    else:
        _print_ts(f"Could not load the list: {initial.error}")

    while True:
        prompt = "edit> " if state.synchronizer.edit_mode.is_editing else f"{t('PROMPT', state.context.locale)}> "
        try:
            user_input = await asyncio.to_thread(input, prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = await handle_line(state, user_input)
        except Exception:
            logger.exception("Console handler crashed.")
            reply = "Internal error while handling the command."

        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
