# src/remindlist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.synchronizer import TaskListSynchronizer
from .context import AppSettingsContext
from .ports import TaskGateway


@dataclass
class AppState:
    # Settings are kept on the state for easy access in commands/connectors.
    settings: object

    gateway: TaskGateway
    synchronizer: TaskListSynchronizer
    context: AppSettingsContext
