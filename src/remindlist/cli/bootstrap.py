# src/remindlist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the gateway implementation and wires it into the synchronizer,
- builds the settings context handed to the console.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.context import AppSettingsContext
from ..core.ports import TaskGateway
from ..core.state import AppState
from ..gateways.http_client import HttpTaskGateway
from ..gateways.sqlite_store import SQLiteTaskGateway
from ..tasks.synchronizer import TaskListSynchronizer

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_gateway(settings: Settings) -> TaskGateway:
    if settings.gateway == "http":
        if not settings.api_base_url:
            raise RuntimeError("HTTP gateway selected but REMINDLIST_API_BASE_URL is not set.")
        return HttpTaskGateway(
            settings.api_base_url,
            token=settings.api_token,
            timeout_seconds=settings.api_timeout_seconds,
        )
    return SQLiteTaskGateway(settings.tasks_db_path)


def create_initial_state(*, settings: Settings | None = None, gateway: TaskGateway | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the gateway injectable makes the app easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if gateway is None:
        gateway = create_gateway(settings)

    synchronizer = TaskListSynchronizer(gateway, comparator=settings.sort_order)
    context = AppSettingsContext(locale=settings.locale, synchronizer=synchronizer)
    logger.info(
        "State created gateway=%s sort=%s locale=%s",
        type(gateway).__name__,
        settings.sort_order,
        settings.locale.value,
    )
    return AppState(settings=settings, gateway=gateway, synchronizer=synchronizer, context=context)


async def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    close = getattr(state.gateway, "aclose", None)
    if close is None:
        return
    try:
        await close()
    except Exception:
        logger.debug("Gateway close failed.", exc_info=True)
