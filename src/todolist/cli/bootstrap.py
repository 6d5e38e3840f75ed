# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the session's TaskListStore with the configured starting filter,
- wires both into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import TaskFilter
from ..tasks.task_store import TaskListStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    start_filter = getattr(settings, "default_filter", TaskFilter.ALL)
    state = AppState(settings=settings, store=TaskListStore(start_filter))
    logger.debug("Session state created filter=%s", state.store.filter.value)
    return state
