# src/todo_remote/remote/remote_data_source.py

from __future__ import annotations

"""
Remote task data source.

Reads go to the REST backend and are published to an observable that UI code
subscribes to. Mutations go straight to the backend and do NOT touch the
observable: call refresh_all_tasks() afterwards to see their effect.

Two sources on purpose (kept from the legacy API, documented per method):
- get_all_tasks / refresh_* / save / complete / delete_task -> remote backend
- get_task / clear_completed_tasks / delete_all_tasks      -> in-process seed store
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ..core.errors import DecodeError, NotFoundError, TaskSourceError
from ..core.observable import MutableObservable, Observable
from ..core.ports import TasksBackend
from ..core.result import Error, Loading, Result, Success
from ..tasks.seed_store import SeedTaskStore
from ..tasks.task_models import Task, TaskRequest

logger = logging.getLogger(__name__)

SERVICE_LATENCY_SECONDS = 2.0

Sleeper = Callable[[float], Awaitable[None]]


def _task_id(task: Task | str) -> str:
    return task.id if isinstance(task, Task) else str(task)


def _pick_task(task_id: str, tasks: Result[list[Task]]) -> Result[Task]:
    match tasks:
        case Loading():
            return tasks
        case Error():
            return tasks
        case Success(value=items):
            for t in items:
                if t.id == task_id:
                    return Success(t)
            return Error(NotFoundError("Not found"))
    raise TypeError(f"Unexpected result variant: {tasks!r}")


class RemoteTaskStore:
    """
    Implementation of the data source that talks to the tasks backend and adds a
    latency simulating network to the legacy single-task lookup.
    """

    def __init__(
        self,
        api: TasksBackend,
        *,
        seed_store: SeedTaskStore | None = None,
        latency_seconds: float = SERVICE_LATENCY_SECONDS,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._api = api
        self._seed = seed_store if seed_store is not None else SeedTaskStore.with_examples()
        self._latency_s = max(0.0, float(latency_seconds))
        self._sleep = sleep
        self._observable_tasks: MutableObservable[Result[list[Task]]] = MutableObservable()

        # Refresh ordering: a completion is published only if no later-started
        # refresh has published already.
        self._refresh_seq = 0
        self._published_seq = 0

    @property
    def seed_store(self) -> SeedTaskStore:
        return self._seed

    # ---- observation ----

    async def refresh_all_tasks(self) -> None:
        """Fetch everything and publish it. Never raises; failures are published as Error."""
        self._refresh_seq += 1
        seq = self._refresh_seq

        try:
            result = await self.get_all_tasks()
        except Exception as e:
            logger.exception("refresh_all_tasks failed seq=%s", seq)
            result = Error(e)

        if seq < self._published_seq:
            logger.debug("Dropping stale refresh seq=%s (published=%s)", seq, self._published_seq)
            return

        self._published_seq = seq
        self._observable_tasks.publish(result)

    async def refresh_task(self, task_id: str) -> None:
        # The backend has no single-task endpoint: refresh the whole list.
        await self.refresh_all_tasks()

    def observe_all_tasks(self) -> Observable[Result[list[Task]]]:
        return self._observable_tasks

    def observe_task(self, task_id: str) -> Observable[Result[Task]]:
        return self._observable_tasks.map(lambda tasks: _pick_task(task_id, tasks))

    # ---- reads ----

    async def get_all_tasks(self) -> Result[list[Task]]:
        try:
            response = await self._api.list_tasks()
        except TaskSourceError as e:
            logger.warning("get_all_tasks failed: %s", e)
            return Error(e)

        tasks = response.to_tasks()
        logger.debug("get_all_tasks: %d task(s)", len(tasks))
        return Success(tasks)

    async def get_task(self, task_id: str) -> Result[Task]:
        """Legacy lookup against the seed store, after a simulated network delay."""
        await self._sleep(self._latency_s)
        task = self._seed.get(task_id)
        if task is not None:
            return Success(task)
        return Error(NotFoundError("Task not found"))

    # ---- mutations (remote) ----

    async def save_task(self, task: Task) -> Result[Task]:
        """
        Create the task on the backend. Only title and description are sent.

        Returns Success(echoed task) or Error(DecodeError) when the echo can't be
        decoded; the task may still have been created in that case. Network
        failures propagate.
        """
        try:
            created = await self._api.create_task(TaskRequest.from_task(task))
        except DecodeError as e:
            logger.error("Error while save_task title=%r: %s", task.title, e)
            return Error(e)

        logger.info("Task saved id=%s", created.id)
        return Success(created.to_task())

    async def complete_task(self, task: Task | str) -> None:
        task_id = _task_id(task)
        await self._api.complete_task(task_id)
        logger.info("Task %s -> completed", task_id)

    async def activate_task(self, task: Task | str) -> None:
        # The backend has no "activate" endpoint.
        logger.debug("activate_task(%s): not supported by the remote source", _task_id(task))

    async def delete_task(self, task_id: str) -> None:
        await self._api.delete_task(task_id)
        logger.info("Task %s -> deleted", task_id)

    # ---- mutations (seed store only) ----

    async def clear_completed_tasks(self) -> None:
        self._seed.clear_completed()

    async def delete_all_tasks(self) -> None:
        self._seed.clear()
