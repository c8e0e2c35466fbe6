# src/todo_remote/tasks/seed_store.py

from __future__ import annotations

import logging

from .task_models import Task

logger = logging.getLogger(__name__)

EXAMPLE_TASKS: tuple[tuple[str, str], ...] = (
    ("Build tower in Pisa", "Ground looks good, no foundation work required."),
    ("Finish bridge in Tacoma", "Found awesome girders at half the cost!"),
)


class SeedTaskStore:
    """
    In-process, insertion-ordered id -> Task map.

    Backs the legacy single-task lookup and the bulk clear/delete operations of the
    remote data source. It is NOT the remote backend: the two can diverge.

    Concurrency:
    - no lock; every method is synchronous, so on a single event loop no other
      coroutine can interleave with a mutation.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: dict[str, Task] = {}
        for t in tasks or []:
            self._tasks[t.id] = t

    @classmethod
    def with_examples(cls) -> SeedTaskStore:
        store = cls()
        for title, description in EXAMPLE_TASKS:
            store.add_task(title, description)
        return store

    def add_task(self, title: str, description: str = "") -> Task:
        task = Task(title=title, description=description)
        self._tasks[task.id] = task
        return task

    def put(self, task: Task) -> None:
        self._tasks[task.id] = task

    def get(self, task_id: str) -> Task | None:
        return self._tasks.get(task_id)

    def all(self) -> list[Task]:
        return list(self._tasks.values())

    def clear_completed(self) -> int:
        """Drop completed tasks, keep the order of the rest. Returns how many were removed."""
        before = len(self._tasks)
        self._tasks = {tid: t for tid, t in self._tasks.items() if not t.is_completed}
        removed = before - len(self._tasks)
        if removed:
            logger.debug("Seed store: cleared %d completed task(s)", removed)
        return removed

    def clear(self) -> None:
        self._tasks.clear()

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks
