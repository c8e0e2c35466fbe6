# src/todo_remote/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL on an asyncio loop.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..config import get_settings
from ..core.result import Error, Result, Success
from ..core.state import AppState
from ..logging_setup import setup_logging
from .bootstrap import aclose_state, create_initial_state
from .commands import registry as command_registry

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _log_tasks_update(result: Result) -> None:
    if isinstance(result, Success):
        logger.debug("Tasks updated: %d task(s)", len(result.value))
    elif isinstance(result, Error):
        logger.debug("Tasks update failed: %s", result.message)


async def run_console_loop(state: AppState) -> None:
    logger.info("Console started (backend=%s).", state.settings.server_url)
    _print_ts("Type a command. Use /help for commands. Use /exit to quit.\n")

    sub = state.store.observe_all_tasks().subscribe(_log_tasks_update)
    try:
        while True:
            try:
                line = (await asyncio.to_thread(input, ">>> ")).strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break

            if not line:
                continue

            if line.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                reply = await command_registry.handle(state, line)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is None:
                reply = "Commands start with '/'. Use /help to list available commands."
            _print_ts(reply)
    finally:
        sub.dispose()

    logger.info("Console finished.")


async def _amain() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    try:
        await run_console_loop(state)
    finally:
        await aclose_state(state)
        logger.info("Bye.")


def main() -> None:
    try:
        asyncio.run(_amain())
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
