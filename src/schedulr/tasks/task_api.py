# src/schedulr/tasks/task_api.py

from __future__ import annotations

from datetime import UTC, date, datetime

from .task_models import Task, TaskStatus

DATE_DISPLAY_FORMAT = "%a, %b %d, %Y"


def sample_tasks() -> list[Task]:
    """Fixed demo tasks the app is seeded with at startup (ids 1-5, 2 completed)."""

    def created(day: str) -> datetime:
        return datetime.fromisoformat(day).replace(tzinfo=UTC)

    return [
        Task(
            id=1,
            title="Complete Software Engineering Assignment",
            description="Finish the web development project for CS 461",
            due_date=date(2025, 6, 25),
            status=TaskStatus.PENDING,
            created_at=created("2025-06-20"),
        ),
        Task(
            id=2,
            title="Study for Computer Science Exam",
            description="Review data structures and algorithms for the midterm",
            due_date=date(2025, 6, 30),
            status=TaskStatus.PENDING,
            created_at=created("2025-06-21"),
        ),
        Task(
            id=3,
            title="Submit Research Proposal",
            description="Complete and submit the research proposal for AI project",
            due_date=date(2025, 6, 20),
            status=TaskStatus.COMPLETED,
            created_at=created("2025-06-18"),
        ),
        Task(
            id=4,
            title="Prepare Project Presentation",
            description="Create slides for the upcoming team presentation",
            due_date=date(2025, 6, 22),
            status=TaskStatus.COMPLETED,
            created_at=created("2025-06-15"),
        ),
        Task(
            id=5,
            title="Review Team Code",
            description="Provide feedback on pull requests from team members",
            due_date=date(2025, 6, 23),
            status=TaskStatus.PENDING,
            created_at=created("2025-06-21"),
        ),
    ]


def is_overdue(task: Task, today: date) -> bool:
    return task.due_date < today and task.status is not TaskStatus.COMPLETED


def format_due_date(d: date) -> str:
    """Display form, e.g. "Wed, Jun 25, 2025"."""
    return d.strftime(DATE_DISPLAY_FORMAT)
