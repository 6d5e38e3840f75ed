# src/todolist/tasks/task_api.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.ports import TaskListRepo
from .task_models import Task

logger = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "No tasks yet."


@dataclass(slots=True, frozen=True)
class TaskCounts:
    total: int
    active: int
    completed: int


def task_counts(store: TaskListRepo) -> TaskCounts:
    tasks = store.all_tasks()
    done = sum(1 for t in tasks if t.completed)
    return TaskCounts(total=len(tasks), active=len(tasks) - done, completed=done)


def visible_task_at(store: TaskListRepo, position: int) -> Task | None:
    """
    Resolve a 1-based position in the *visible* list to a task.

    Positions are what the console shows; ids stay internal.
    """
    if position < 1:
        return None
    visible = store.visible_tasks()
    if position > len(visible):
        return None
    return visible[position - 1]


def render_task_line(position: int, task: Task) -> str:
    box = "[x]" if task.completed else "[ ]"
    return f"{position}. {box} {task.text}"


def render_visible(store: TaskListRepo) -> str:
    visible = store.visible_tasks()
    if not visible:
        return EMPTY_LIST_TEXT
    return "\n".join(render_task_line(i, t) for i, t in enumerate(visible, start=1))
