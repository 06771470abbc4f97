# src/schedulr/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from ..config import THEMES
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state for easy access from commands.
    settings: object

    task_store: TaskRepo
    theme: str = "dark"

    # Local calendar date used for "overdue" markers.
    today: Callable[[], date] = field(default=date.today)

    def set_theme(self, theme: str) -> str:
        theme = theme.strip().lower()
        if theme not in THEMES:
            raise ValueError(f"unknown theme: {theme!r}")
        self.theme = theme
        return self.theme

    def toggle_theme(self) -> str:
        return self.set_theme("light" if self.theme == "dark" else "dark")
