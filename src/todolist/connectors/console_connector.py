# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import cmd_add
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_api import render_visible

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState) -> None:
    """
    Interactive REPL over the session's task list.

    Slash input goes to the command registry; anything else is added as a task.
    """
    logger.info("Console connector started (filter=%s).", state.store.filter.value)

    app_name = str(getattr(state.settings, "app_name", "todolist"))
    prompt = str(getattr(state.settings, "prompt", ">>> "))

    print(f"[{app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_visible(state.store))

    while True:
        try:
            user_input = input(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
            if reply is None:
                reply = cmd_add(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        print(reply)

    logger.info("Console connector finished.")
