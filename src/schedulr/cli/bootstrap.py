# src/schedulr/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task store into AppState and seeds the sample tasks.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_api import sample_tasks
from ..tasks.task_store import Clock, TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    if getattr(settings, "log_to_file", False):
        settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    seed = sample_tasks() if getattr(settings, "seed_sample_data", True) else []
    store = TaskStore(clock=clock, tasks=seed)
    if seed:
        logger.info("Sample data loaded: %d tasks", len(seed))

    return AppState(
        settings=settings,
        task_store=store,
        theme=getattr(settings, "theme", "dark"),
    )
