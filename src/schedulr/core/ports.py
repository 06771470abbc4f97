# src/schedulr/core/ports.py

"""
Ports (interfaces) used by the presentation layer.

Commands depend on this Protocol instead of the concrete TaskStore,
which keeps the store swappable (e.g. a persistent adapter) and makes testing easier.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol

from ..tasks.task_models import ChartData, DerivedStatistics, Task


class TaskRepo(Protocol):
    # CRUD
    def add_task(
        self,
        title: str | None,
        description: str | None = "",
        due_date: date | datetime | str | None = None,
    ) -> Task: ...

    def get_task(self, task_id: int) -> Task: ...
    def toggle_status(self, task_id: int) -> Task: ...
    def delete_task(self, task_id: int) -> None: ...
    def list_tasks(self) -> list[Task]: ...
    def count_tasks(self) -> int: ...

    # Derived data
    def compute_statistics(self) -> DerivedStatistics: ...
    def chart_data(self) -> ChartData: ...
