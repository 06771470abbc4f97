# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from schedulr.core.state import AppState
from schedulr.tasks.task_api import sample_tasks
from schedulr.tasks.task_store import TaskStore

from .fakes import FakeClock

TODAY = date(2025, 6, 24)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="schedulr-test",
        log_level="DEBUG",
        log_to_file=False,
        console_enabled=True,
        seed_sample_data=True,
        theme="dark",
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    """Empty store driven by the fake clock."""
    return TaskStore(clock=clock)


@pytest.fixture()
def seeded_store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock, tasks=sample_tasks())


@pytest.fixture()
def state(settings: SimpleNamespace, seeded_store: TaskStore) -> AppState:
    """AppState over the seeded store, with a fixed "today" for overdue markers."""
    return AppState(
        settings=settings,
        task_store=seeded_store,
        theme=settings.theme,
        today=lambda: TODAY,
    )
