# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Commands and connectors depend on this Protocol instead of TaskListStore
directly, so tests can swap in fakes and the store stays the only owner of state.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskFilter


class TaskListRepo(Protocol):
    # Mutators
    def add(self, raw_text: str) -> Task | None: ...
    def toggle(self, task_id: int) -> None: ...
    def remove(self, task_id: int) -> None: ...
    def set_filter(self, task_filter: TaskFilter) -> None: ...

    # Queries
    @property
    def filter(self) -> TaskFilter: ...
    def visible_tasks(self) -> list[Task]: ...
    def all_tasks(self) -> list[Task]: ...
    def get(self, task_id: int) -> Task | None: ...
    def __len__(self) -> int: ...
