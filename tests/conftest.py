# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from remindlist.cli.bootstrap import create_initial_state
from remindlist.config import Settings
from remindlist.core.state import AppState
from remindlist.tasks.synchronizer import TaskListSynchronizer
from remindlist.tasks.task_models import Locale, Task

from .fakes import FakeClock, FakeGateway


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Explicit Settings for tests.

    Built directly rather than from the environment, to keep unit tests
    isolated and deterministic.
    """
    return Settings(
        app_name="remindlist-test",
        log_level="DEBUG",
        locale=Locale.EN,
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        gateway="sqlite",
        api_base_url="",
        api_token=None,
        api_timeout_seconds=5.0,
        sort_order="favorites_first",
    )


@pytest.fixture()
def milk() -> Task:
    return Task(id="1", name="Buy milk")


@pytest.fixture()
def gateway(milk: Task) -> FakeGateway:
    return FakeGateway([milk])


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def sync(gateway: FakeGateway, clock: FakeClock) -> TaskListSynchronizer:
    return TaskListSynchronizer(gateway, clock=clock)


@pytest.fixture()
def state(settings: Settings, gateway: FakeGateway) -> AppState:
    """AppState wired with the in-memory gateway."""
    return create_initial_state(settings=settings, gateway=gateway)
