# src/schedulr/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import format_due_date, is_overdue
from ..tasks.task_models import NotFoundError, TaskStatus, ValidationError
from ..tasks.task_stats import percent

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

ADD_USAGE = "Usage: /add <title> | <YYYY-MM-DD> [| <description>]"


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Handlers that get the untokenized rest of the line as a single arg.
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw_args:
            self._raw.update([key, *(a.lower() for a in aliases)])

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        if name in self._raw:
            rest = line[1:].lstrip()[len(parts[0]) :].strip()
            args = [rest] if rest else []

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    app_name = str(getattr(state.settings, "app_name", "schedulr"))
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  Theme: {state.theme}\n"
        f"  Tasks: {state.task_store.count_tasks()}"
    )


def cmd_dashboard(state: AppState, args: list[str]) -> str:
    stats = state.task_store.compute_statistics()
    return (
        "Dashboard:\n"
        f"  Total tasks: {stats.total}\n"
        f"  Completed: {stats.completed}\n"
        f"  Pending: {stats.pending}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks yet! Add your first task with /add to get started."

    today = state.today()
    lines = [f"Tasks ({len(tasks)}):"]
    for t in tasks:
        mark = "x" if t.status is TaskStatus.COMPLETED else " "
        overdue = " (Overdue)" if is_overdue(t, today) else ""
        lines.append(
            f"  [{mark}] #{t.id} {t.title} | Due: {format_due_date(t.due_date)}{overdue} | {t.status}"
        )
        if t.description:
            lines.append(f"        {t.description}")
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title> | <YYYY-MM-DD>
    /add <title> | <YYYY-MM-DD> | <description>
    """
    parts = [p.strip() for p in " ".join(args).split("|")]
    if len(parts) < 2:
        return ADD_USAGE

    title, due = parts[0], parts[1]
    description = " | ".join(parts[2:])

    try:
        task = state.task_store.add_task(title, description, due)
    except ValidationError as e:
        return f"Please fill in all required fields ({e}).\n{ADD_USAGE}"

    logger.info("Task added id=%s", task.id)
    return f"Task added successfully (#{task.id}, due {format_due_date(task.due_date)})."


def cmd_done(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /done <id>  -> pending becomes completed, completed becomes pending
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"

    try:
        task = state.task_store.toggle_status(task_id)
    except NotFoundError:
        return f"Task #{task_id} not found."

    if task.status is TaskStatus.COMPLETED:
        if emit:
            with contextlib.suppress(Exception):
                emit("*** Success! ***")
        return f"Task #{task.id} completed! Great job!"
    return f"Task #{task.id} marked as pending."


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"

    try:
        task = state.task_store.get_task(task_id)
        state.task_store.delete_task(task_id)
    except NotFoundError:
        return f"Task #{task_id} not found."

    logger.info("Task deleted id=%s", task_id)
    return f'Task deleted: "{task.title}".'


def cmd_stats(state: AppState, args: list[str]) -> str:
    stats = state.task_store.compute_statistics()
    return (
        "Statistics:\n"
        f"  Completion rate: {stats.completion_rate}%\n"
        f"  Productivity score: {stats.productivity_score}\n"
        f"  Current streak: {stats.current_streak} days"
    )


def cmd_chart(state: AppState, args: list[str]) -> str:
    data = state.task_store.chart_data()
    total = data.total
    lines = ["Task Completion Overview:"]
    for label, value in zip(data.labels, data.values, strict=True):
        lines.append(f"  {label}: {value} ({percent(value, total)}%)")
    return "\n".join(lines)


def cmd_theme(state: AppState, args: list[str]) -> str:
    """
    /theme         -> toggle dark/light
    /theme <name>  -> set explicitly
    """
    if not args:
        theme = state.toggle_theme()
    else:
        try:
            theme = state.set_theme(args[0])
        except ValueError:
            return "Usage: /theme [light|dark]"

    return f"{theme.capitalize()} mode activated."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("dashboard", cmd_dashboard, help_text="Show task counts.", aliases=["dash"])
registry.register("list", cmd_list, help_text="List tasks by due date.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <title> | <YYYY-MM-DD> [| <description>].",
    raw_args=True,
)
registry.register("done", cmd_done, help_text="Toggle a task between pending and completed.", aliases=["toggle"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm", "del"])
registry.register("stats", cmd_stats, help_text="Completion rate, productivity score and streak.")
registry.register("chart", cmd_chart, help_text="Completed vs pending breakdown.")
registry.register("theme", cmd_theme, help_text="Toggle theme: /theme [light|dark].")
registry.register("status", cmd_status, help_text="Show current settings (app/theme/tasks).")
