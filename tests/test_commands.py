# tests/test_commands.py

from __future__ import annotations

from todolist.cli.commands import CommandRegistry, registry
from todolist.tasks.task_models import TaskFilter


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[str] = []

    def h(state, arg_text):
        seen.append(arg_text)
        return "ok"

    reg.register("a", h, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x  y") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert seen == ["x  y", ""]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_keeps_inner_spacing_and_rejects_blank(state) -> None:
    assert registry.handle(state, "/add  buy   milk ") == "Added: buy   milk"
    assert "Nothing to add" in (registry.handle(state, "/add    ") or "")
    assert [t.text for t in state.store.all_tasks()] == ["buy   milk"]


def test_toggle_and_remove_use_visible_positions(state) -> None:
    registry.handle(state, "/add one")
    registry.handle(state, "/add two")
    registry.handle(state, "/add three")

    assert registry.handle(state, "/toggle 2") == "Completed: two"
    registry.handle(state, "/filter active")

    # visible list is now [one, three]; position 2 is "three"
    assert registry.handle(state, "/rm 2") == "Removed: three"
    assert [t.text for t in state.store.all_tasks()] == ["one", "two"]

    registry.handle(state, "/filter completed")
    assert registry.handle(state, "/done 1") == "Marked active: two"
    assert state.store.visible_tasks() == []


def test_bad_positions_give_usage_and_change_nothing(state) -> None:
    registry.handle(state, "/add one")
    before = state.store.all_tasks()

    assert "Usage" in (registry.handle(state, "/toggle") or "")
    assert "Usage" in (registry.handle(state, "/toggle x") or "")
    assert "No visible task #5" in (registry.handle(state, "/toggle 5") or "")
    assert "No visible task #0" in (registry.handle(state, "/rm 0") or "")
    assert "Usage" in (registry.handle(state, "/del") or "")

    assert state.store.all_tasks() == before


def test_filter_command(state) -> None:
    assert "Filter is all" in (registry.handle(state, "/filter") or "")
    assert "Usage" in (registry.handle(state, "/filter done") or "")
    assert state.store.filter is TaskFilter.ALL

    reply = registry.handle(state, "/filter Completed") or ""
    assert reply.startswith("Filter: completed")
    assert "No tasks yet." in reply
    assert state.store.filter is TaskFilter.COMPLETED


def test_list_and_status(state) -> None:
    assert registry.handle(state, "/ls") == "No tasks yet."

    registry.handle(state, "/add a")
    registry.handle(state, "/add b")
    registry.handle(state, "/toggle 1")

    assert registry.handle(state, "/list") == "1. [x] a\n2. [ ] b"
    status = registry.handle(state, "/status") or ""
    assert "Tasks: 2 (1 active, 1 completed)" in status
    assert "Filter: all" in status


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/?") or ""
    for name in ("/add", "/toggle", "/rm", "/filter", "/list", "/status", "/exit"):
        assert name in text
