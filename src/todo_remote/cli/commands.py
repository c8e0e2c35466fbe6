# src/todo_remote/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core.errors import TaskSourceError, friendly_error_message
from ..core.result import Error, Loading, Result, Success
from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /list, ...)."""

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

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Backend failures (TaskSourceError) are turned into a readable reply;
        anything else propagates to the caller.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return await handler(state, args)
        except TaskSourceError as e:
            logger.info("/%s failed: %s", name, e)
            return friendly_error_message(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "x" if task.is_completed else " "
    line = f"[{mark}] {task.title_for_list}  ({task.id})"
    if task.description and task.title.strip():
        line += f"\n      {task.description}"
    return line


def _describe(result: Result | None, render: Callable[[object], str]) -> str:
    match result:
        case None:
            return "Nothing loaded yet."
        case Loading():
            return "Loading..."
        case Error() as err:
            return friendly_error_message(err.cause)
        case Success(value=value):
            return render(value)
    return repr(result)


def _render_list(tasks) -> str:
    if not tasks:
        return "No tasks."
    return "\n".join(format_task(t) for t in tasks)


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_list(state: AppState, args: list[str]) -> str:
    await state.store.refresh_all_tasks()
    return _describe(state.store.observe_all_tasks().value, _render_list)


async def cmd_show(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /show <task id>"
    task_id = args[0]
    await state.store.refresh_task(task_id)
    return _describe(state.store.observe_task(task_id).value, format_task)


async def cmd_seed(state: AppState, args: list[str]) -> str:
    """
    /seed       -> list the local seed tasks
    /seed <id>  -> legacy single-task lookup (simulated latency)
    """
    seed = state.store.seed_store
    if not args:
        return "Seed tasks:\n" + _render_list(seed.all())
    result = await state.store.get_task(args[0])
    return _describe(result, format_task)


async def cmd_add(state: AppState, args: list[str]) -> str:
    """/add <title> [| <description>]"""
    raw = " ".join(args).strip()
    if not raw:
        return "Usage: /add <title> [| <description>]"
    title, _, description = raw.partition("|")
    task = Task(title=title.strip(), description=description.strip())
    if task.is_empty:
        return "Task is empty."

    result = await state.store.save_task(task)
    if isinstance(result, Success):
        return f"Saved: {format_task(result.value)}"
    # The backend may have created the task even though its echo was unreadable.
    return f"Sent, but the reply could not be read ({_describe(result, str)}). Use /list to check."


async def cmd_complete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /complete <task id>"
    await state.store.complete_task(args[0])
    return f"Task {args[0]} marked as completed. Use /list to refresh."


async def cmd_activate(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /activate <task id>"
    await state.store.activate_task(args[0])
    return "Activating tasks is not supported by the remote backend."


async def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <task id>"
    await state.store.delete_task(args[0])
    return f"Task {args[0]} deleted. Use /list to refresh."


async def cmd_clear_completed(state: AppState, args: list[str]) -> str:
    before = len(state.store.seed_store)
    await state.store.clear_completed_tasks()
    removed = before - len(state.store.seed_store)
    return f"Cleared {removed} completed seed task(s). The backend is unchanged."


async def cmd_delete_all(state: AppState, args: list[str]) -> str:
    await state.store.delete_all_tasks()
    return "Seed tasks deleted. The backend is unchanged."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Refresh and list tasks from the backend.", aliases=["ls"])
registry.register("show", cmd_show, help_text="Refresh and show one task: /show <id>.")
registry.register("seed", cmd_seed, help_text="Local seed tasks: /seed | /seed <id>.")
registry.register("add", cmd_add, help_text="Create a task: /add <title> [| <description>].")
registry.register("complete", cmd_complete, help_text="Mark a task completed: /complete <id>.")
registry.register("activate", cmd_activate, help_text="Re-activate a task (not supported remotely).")
registry.register("delete", cmd_delete, help_text="Delete a task on the backend: /delete <id>.", aliases=["rm"])
registry.register(
    "clear-completed", cmd_clear_completed, help_text="Drop completed tasks from the seed store."
)
registry.register("delete-all", cmd_delete_all, help_text="Drop all tasks from the seed store.")
