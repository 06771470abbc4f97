# src/schedulr/tasks/task_stats.py

"""
Derived statistics over a task collection.

All functions here are pure: they take the tasks and "now" and return numbers.
The store calls them on demand; nothing is cached.

Notes:
- A due date counts as midnight UTC of that day (created_at <= due midnight).
- The productivity score compares created_at with the due date, not a
  completion timestamp. That is how the dashboard has always scored it.
- Percentages round half up, so 2.5% shows as 3, not 2.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime, time, timedelta

from .task_models import ChartData, DerivedStatistics, Task, TaskStatus

STREAK_WINDOW = timedelta(days=7)
STREAK_CAP_DAYS = 30
SCORE_CAP = 100


def percent(part: int, total: int) -> int:
    """round(100 * part / total) with half-up rounding; 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)


def due_midnight(due: date) -> datetime:
    return datetime.combine(due, time.min, tzinfo=UTC)


def as_utc(ts: datetime) -> datetime:
    # Naive timestamps are treated as UTC.
    if ts.tzinfo is None:
        return ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC)


def completed_on_time(task: Task) -> bool:
    return task.status is TaskStatus.COMPLETED and as_utc(task.created_at) <= due_midnight(task.due_date)


def completed_recently(task: Task, now: datetime) -> bool:
    return task.status is TaskStatus.COMPLETED and as_utc(task.created_at) >= as_utc(now) - STREAK_WINDOW


def compute_statistics(tasks: Iterable[Task], now: datetime) -> DerivedStatistics:
    items = list(tasks)
    total = len(items)
    completed = sum(1 for t in items if t.status is TaskStatus.COMPLETED)
    pending = sum(1 for t in items if t.status is TaskStatus.PENDING)

    on_time = sum(1 for t in items if completed_on_time(t))
    recent = sum(1 for t in items if completed_recently(t, now))

    return DerivedStatistics(
        total=total,
        completed=completed,
        pending=pending,
        completion_rate=percent(completed, total),
        productivity_score=min(percent(on_time, total), SCORE_CAP),
        current_streak=min(recent // 2, STREAK_CAP_DAYS),
    )


def chart_data(tasks: Iterable[Task]) -> ChartData:
    items = list(tasks)
    completed = sum(1 for t in items if t.status is TaskStatus.COMPLETED)
    pending = sum(1 for t in items if t.status is TaskStatus.PENDING)
    return ChartData(values=[completed, pending])
