# tests/test_task_store.py

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import pytest

from schedulr.tasks.task_models import NotFoundError, TaskStatus, ValidationError
from schedulr.tasks.task_store import TaskStore, parse_due_date

from .fakes import FakeClock


def test_add_task_assigns_id_and_defaults(store: TaskStore, clock: FakeClock) -> None:
    task = store.add_task("X", None, "2099-01-01")

    assert task.id == 1
    assert task.title == "X"
    assert task.description == ""
    assert task.due_date == date(2099, 1, 1)
    assert task.status is TaskStatus.PENDING
    assert task.created_at == datetime(2025, 6, 24, 12, 0, tzinfo=UTC)
    assert task.updated_at is None
    assert [t.id for t in store.list_tasks()] == [task.id]


def test_add_task_trims_title_and_description(store: TaskStore) -> None:
    task = store.add_task("  Write report  ", "  draft first  ", date(2025, 7, 1))
    assert task.title == "Write report"
    assert task.description == "draft first"


def test_add_task_accepts_datetime_due(store: TaskStore) -> None:
    task = store.add_task("X", "", datetime(2025, 7, 1, 18, 30))
    assert task.due_date == date(2025, 7, 1)


def test_ids_are_unique_and_never_reused(store: TaskStore) -> None:
    a = store.add_task("a", "", "2025-07-01")
    b = store.add_task("b", "", "2025-07-02")
    store.delete_task(b.id)
    c = store.add_task("c", "", "2025-07-03")

    assert len({a.id, b.id, c.id}) == 3
    assert c.id > b.id


def test_ids_continue_after_seeded_tasks(seeded_store: TaskStore) -> None:
    task = seeded_store.add_task("new", "", "2025-07-01")
    assert task.id == 6


@pytest.mark.parametrize(
    ("title", "due"),
    [
        ("", "2025-07-01"),
        ("   ", "2025-07-01"),
        (None, "2025-07-01"),
        ("X", None),
        ("X", ""),
        ("X", "next tuesday"),
    ],
)
def test_add_task_validation_leaves_collection_unchanged(
    seeded_store: TaskStore, title, due
) -> None:
    before = seeded_store.list_tasks()

    with pytest.raises(ValidationError):
        seeded_store.add_task(title, "desc", due)

    assert seeded_store.list_tasks() == before
    # a failed add must not burn an id
    assert seeded_store.add_task("ok", "", "2025-07-01").id == 6


def test_validation_error_is_a_value_error(store: TaskStore) -> None:
    with pytest.raises(ValueError):
        store.add_task("", "", "2025-07-01")


def test_toggle_status_is_an_involution() -> None:
    clock = FakeClock(tick=timedelta(seconds=1))
    store = TaskStore(clock=clock)
    task = store.add_task("X", "", "2025-07-01")

    first = store.toggle_status(task.id)
    assert first.status is TaskStatus.COMPLETED
    assert first.updated_at is not None

    second = store.toggle_status(task.id)
    assert second.status is TaskStatus.PENDING
    assert second.updated_at is not None
    assert second.updated_at > first.updated_at

    # created_at is immutable
    assert second.created_at == task.created_at


def test_toggle_missing_task_raises(store: TaskStore) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        store.toggle_status(42)
    assert exc_info.value.task_id == 42
    assert isinstance(exc_info.value, LookupError)


def test_delete_removes_exactly_one(seeded_store: TaskStore) -> None:
    seeded_store.delete_task(3)

    ids = [t.id for t in seeded_store.list_tasks()]
    assert 3 not in ids
    assert len(ids) == 4

    with pytest.raises(NotFoundError):
        seeded_store.delete_task(3)
    assert seeded_store.count_tasks() == 4


def test_get_task(seeded_store: TaskStore) -> None:
    assert seeded_store.get_task(2).title == "Study for Computer Science Exam"
    with pytest.raises(NotFoundError):
        seeded_store.get_task(99)


def test_list_tasks_sorted_by_due_date(seeded_store: TaskStore) -> None:
    seeded_store.add_task("far", "", "2099-01-01")
    seeded_store.add_task("early", "", "2025-01-01")

    tasks = seeded_store.list_tasks()
    dues = [t.due_date for t in tasks]
    assert dues == sorted(dues)
    assert tasks[0].title == "early"
    assert tasks[-1].title == "far"
    assert [t.id for t in tasks[1:6]] == [3, 4, 5, 1, 2]


def test_list_tasks_ties_keep_insertion_order(store: TaskStore) -> None:
    store.add_task("first", "", "2025-07-01")
    store.add_task("second", "", "2025-07-01")
    store.add_task("earlier", "", "2025-06-30")

    assert [t.title for t in store.list_tasks()] == ["earlier", "first", "second"]


def test_returned_tasks_are_copies(store: TaskStore) -> None:
    task = store.add_task("X", "", "2025-07-01")
    task.title = "changed outside"
    store.list_tasks()[0].status = TaskStatus.COMPLETED

    stored = store.get_task(task.id)
    assert stored.title == "X"
    assert stored.status is TaskStatus.PENDING


def test_load_tasks_rejects_duplicate_ids(seeded_store: TaskStore) -> None:
    tasks = seeded_store.list_tasks()
    with pytest.raises(ValidationError):
        TaskStore(tasks=[tasks[0], tasks[0]])


def test_parse_due_date() -> None:
    assert parse_due_date("2025-06-25") == date(2025, 6, 25)
    assert parse_due_date(" 2025-06-25 ") == date(2025, 6, 25)
    assert parse_due_date(date(2025, 6, 25)) == date(2025, 6, 25)
    with pytest.raises(ValidationError):
        parse_due_date("25/06/2025")
