# src/todolist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_api import render_visible, task_counts, visible_task_at
from ..tasks.task_models import TaskFilter

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers get the raw text after the command name so task text keeps its spacing.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(None, 1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        arg_text = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, arg_text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_position(arg_text: str) -> int | None:
    raw = arg_text.strip()
    if not raw:
        return None
    try:
        return int(raw.split()[0])
    except ValueError:
        return None


def cmd_help(state: AppState, arg_text: str) -> str:
    return registry.build_help() + "\n  /exit - Leave the console."


def cmd_add(state: AppState, arg_text: str) -> str:
    task = state.store.add(arg_text)
    if task is None:
        return "Nothing to add (task text is empty)."
    return f"Added: {task.text}"


def cmd_toggle(state: AppState, arg_text: str) -> str:
    """
    /toggle N -> flip completion of the N-th visible task
    """
    position = _parse_position(arg_text)
    if position is None:
        return "Usage: /toggle <number> (see /list for numbers)."

    task = visible_task_at(state.store, position)
    if task is None:
        return f"No visible task #{position}. Use /list to see numbers."

    state.store.toggle(task.id)
    return f"{'Marked active' if task.completed else 'Completed'}: {task.text}"


def cmd_remove(state: AppState, arg_text: str) -> str:
    position = _parse_position(arg_text)
    if position is None:
        return "Usage: /rm <number> (see /list for numbers)."

    task = visible_task_at(state.store, position)
    if task is None:
        return f"No visible task #{position}. Use /list to see numbers."

    state.store.remove(task.id)
    return f"Removed: {task.text}"


def cmd_filter(state: AppState, arg_text: str) -> str:
    """
    /filter            -> show current filter
    /filter <value>    -> all | active | completed
    """
    choices = " | ".join(f.value for f in TaskFilter)
    if not arg_text.strip():
        return f"Filter is {state.store.filter.value}. Use /filter {choices}."

    task_filter = TaskFilter.parse(arg_text)
    if task_filter is None:
        return f"Usage: /filter {choices}."

    state.store.set_filter(task_filter)
    return f"Filter: {task_filter.value}\n{render_visible(state.store)}"


def cmd_list(state: AppState, arg_text: str) -> str:
    return render_visible(state.store)


def cmd_status(state: AppState, arg_text: str) -> str:
    counts = task_counts(state.store)
    return (
        "Status:\n"
        f"  Tasks: {counts.total} ({counts.active} active, {counts.completed} completed)\n"
        f"  Filter: {state.store.filter.value}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text> (plain text works too).")
registry.register(
    "toggle", cmd_toggle, help_text="Toggle a task done/active: /toggle <number>.", aliases=["done"]
)
registry.register(
    "rm", cmd_remove, help_text="Delete a task: /rm <number>.", aliases=["del", "delete"]
)
registry.register("filter", cmd_filter, help_text="Show or set filter: /filter all | active | completed.")
registry.register("list", cmd_list, help_text="Show visible tasks.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show task counts and current filter.")
