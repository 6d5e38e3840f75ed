# tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from dataclasses import replace

from .task_models import Task, TaskFilter

logger = logging.getLogger(__name__)


class TaskListStore:
    """
    In-memory todo list: the ordered task sequence plus the active filter.

    Rules:
    - tasks keep insertion order; nothing reorders them
    - ids come from a per-store counter and are never reused
    - empty text and unknown ids are ignored silently (no exception)
    - every query returns copies, so callers can only mutate via add/toggle/remove

    Nothing is written to disk; the list lives as long as the store object.
    """

    def __init__(self, task_filter: TaskFilter = TaskFilter.ALL) -> None:
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        self._filter = task_filter
        logger.debug("TaskListStore ready filter=%s", self._filter.value)

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ---- mutators ----

    def add(self, raw_text: str) -> Task | None:
        text = (raw_text or "").strip()
        if not text:
            return None

        task = Task(id=next(self._ids), text=text)
        self._tasks.append(task)
        logger.debug("Task added id=%s total=%s", task.id, len(self._tasks))
        return replace(task)

    def toggle(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            return

        task = self._tasks[idx]
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)

    def remove(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            return

        del self._tasks[idx]
        logger.debug("Task removed id=%s total=%s", task_id, len(self._tasks))

    def set_filter(self, task_filter: TaskFilter) -> None:
        self._filter = TaskFilter(task_filter)
        logger.debug("Filter set to %s", self._filter.value)

    # ---- queries ----

    @property
    def filter(self) -> TaskFilter:
        return self._filter

    def visible_tasks(self) -> list[Task]:
        """Tasks matching the active filter, in insertion order (copies)."""
        return [replace(t) for t in self._tasks if self._filter.matches(t)]

    def all_tasks(self) -> list[Task]:
        return [replace(t) for t in self._tasks]

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else replace(self._tasks[idx])

    def __len__(self) -> int:
        return len(self._tasks)
