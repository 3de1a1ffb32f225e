# src/todo_groups/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..cli.commands import add_group_from_text, registry as command_registry
from ..cli.render import render_current
from ..core.state import AppState

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[3J\033[H\033[2J\033[H"


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


async def handle_line(state: AppState, line: str) -> str | None:
    """One user event. Returns the reply to print (None for empty input)."""
    if not line:
        return None
    reply = await command_registry.handle(state, line)
    if reply is None:
        reply = await add_group_from_text(state, line)
    return reply


async def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tab=%s).", state.navigator.current)
    _print_ts("[CONSOLE] Type a name to add a group. Use /help for commands. Use /exit to quit.\n")

    clear = bool(getattr(state.settings, "console_clear", False))
    print(render_current(state))

    while True:
        try:
            user_input = (await asyncio.to_thread(input, "\n> ")).strip()
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
            reply = await handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            continue
        if clear:
            print(CLEAR_SCREEN, end="", flush=True)
        print(reply)

    logger.info("Console connector finished.")
