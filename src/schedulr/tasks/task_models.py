# src/schedulr/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum


class TaskStatus(StrEnum):
    """Task lifecycle status. Only the two values below are valid."""

    PENDING = "pending"
    COMPLETED = "completed"

    def toggled(self) -> TaskStatus:
        return TaskStatus.PENDING if self is TaskStatus.COMPLETED else TaskStatus.COMPLETED


class TaskError(Exception):
    """Base class for errors reported by the task store."""


class ValidationError(TaskError, ValueError):
    """A required field is missing (or unparseable) on add."""


class NotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id


@dataclass(slots=True)
class Task:
    id: int
    title: str
    due_date: date
    created_at: datetime

    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    updated_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED


@dataclass(frozen=True, slots=True)
class DerivedStatistics:
    """
    Aggregate metrics over the current task collection.

    Always recomputed from the tasks; never stored or mutated on its own.
    """

    total: int = 0
    completed: int = 0
    pending: int = 0
    completion_rate: int = 0
    productivity_score: int = 0
    current_streak: int = 0


@dataclass(frozen=True, slots=True)
class ChartData:
    labels: list[str] = field(default_factory=lambda: ["Completed Tasks", "Pending Tasks"])
    values: list[int] = field(default_factory=lambda: [0, 0])

    @property
    def total(self) -> int:
        return sum(self.values)
