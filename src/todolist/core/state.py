# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskListRepo


@dataclass
class AppState:
    """One console session: settings plus the task list it owns."""

    # Store Settings on the state for easy access in commands/connectors.
    settings: Any
    store: TaskListRepo
