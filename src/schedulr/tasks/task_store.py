# src/schedulr/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import UTC, date, datetime

from .task_models import (
    ChartData,
    DerivedStatistics,
    NotFoundError,
    Task,
    TaskStatus,
    ValidationError,
)
from .task_stats import as_utc, chart_data, compute_statistics

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def parse_due_date(raw: date | datetime | str | None) -> date:
    """
    Accept a date, a datetime (its calendar date is used) or "YYYY-MM-DD".

    Raises ValidationError for missing or unparseable values.
    """
    if raw is None:
        raise ValidationError("due date is required")
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw

    s = str(raw).strip()
    if not s:
        raise ValidationError("due date is required")
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise ValidationError(f"due date must be YYYY-MM-DD, got {s!r}") from None


class TaskStore:
    """
    In-memory task store.

    Owns the task collection for one process; the collection lives and dies
    with the store instance (nothing is written to disk).

    Not thread-safe: callers drive it from a single control loop.
    """

    def __init__(self, *, clock: Clock | None = None, tasks: Iterable[Task] = ()) -> None:
        self._clock: Clock = clock or utc_now
        self._tasks: list[Task] = []
        self._next_id = 1
        self.load_tasks(tasks)
        logger.info("TaskStore ready total=%s", self.count_tasks())

    # ---- low-level helpers ----

    def _now(self) -> datetime:
        return as_utc(self._clock())

    def _index_of(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise NotFoundError(task_id)

    # ---- public API ----

    def load_tasks(self, tasks: Iterable[Task]) -> None:
        """Replace the collection (used to seed sample data). Ids must be unique."""
        items = list(tasks)
        ids = [t.id for t in items]
        if len(set(ids)) != len(ids):
            raise ValidationError("task ids must be unique")

        self._tasks = [replace(t) for t in items]
        self._next_id = max([self._next_id - 1, *ids], default=0) + 1
        if items:
            logger.debug("Loaded %d tasks, next id=%s", len(items), self._next_id)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(
        self,
        title: str | None,
        description: str | None = "",
        due_date: date | datetime | str | None = None,
    ) -> Task:
        title = (title or "").strip()
        if not title:
            raise ValidationError("title is required")
        due = parse_due_date(due_date)

        task = Task(
            id=self._next_id,
            title=title,
            description=(description or "").strip(),
            due_date=due,
            status=TaskStatus.PENDING,
            created_at=self._now(),
        )
        self._tasks.append(task)
        self._next_id += 1

        logger.debug("Task added id=%s due=%s title=%r", task.id, task.due_date, task.title)
        return replace(task)

    def get_task(self, task_id: int) -> Task:
        return replace(self._tasks[self._index_of(task_id)])

    def toggle_status(self, task_id: int) -> Task:
        task = self._tasks[self._index_of(task_id)]
        task.status = task.status.toggled()
        task.updated_at = self._now()

        logger.debug("Task toggled id=%s status=%s", task.id, task.status.value)
        return replace(task)

    def delete_task(self, task_id: int) -> None:
        removed = self._tasks.pop(self._index_of(task_id))
        logger.debug("Task deleted id=%s title=%r", removed.id, removed.title)

    def list_tasks(self) -> list[Task]:
        """Tasks ordered by due date (earliest first); ties keep insertion order."""
        return [replace(t) for t in sorted(self._tasks, key=lambda t: t.due_date)]

    def compute_statistics(self) -> DerivedStatistics:
        return compute_statistics(self._tasks, self._now())

    def chart_data(self) -> ChartData:
        return chart_data(self._tasks)
