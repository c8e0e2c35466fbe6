# src/todo_remote/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the data layer.

The remote store depends on a typed backend Protocol instead of raw HTTP,
and exposes the TasksDataSource operation set that a repository layer can blend
with a local store. Both keep implementations swappable and make testing easier.
"""

from typing import Protocol, runtime_checkable

from ..tasks.task_models import Task, TaskListResponse, TaskRequest, TaskResponse
from .observable import Observable
from .result import Result


class TasksBackend(Protocol):
    """Typed view of the tasks REST API. Failures raise TaskSourceError subclasses."""

    async def list_tasks(self) -> TaskListResponse: ...
    async def create_task(self, request: TaskRequest) -> TaskResponse: ...
    async def complete_task(self, task_id: str) -> None: ...
    async def delete_task(self, task_id: str) -> None: ...


@runtime_checkable
class TasksDataSource(Protocol):
    # Observation
    async def refresh_all_tasks(self) -> None: ...
    async def refresh_task(self, task_id: str) -> None: ...
    def observe_all_tasks(self) -> Observable[Result[list[Task]]]: ...
    def observe_task(self, task_id: str) -> Observable[Result[Task]]: ...

    # One-shot reads
    async def get_all_tasks(self) -> Result[list[Task]]: ...
    async def get_task(self, task_id: str) -> Result[Task]: ...

    # Mutations
    async def save_task(self, task: Task) -> Result[Task]: ...
    async def complete_task(self, task: Task | str) -> None: ...
    async def activate_task(self, task: Task | str) -> None: ...
    async def clear_completed_tasks(self) -> None: ...
    async def delete_all_tasks(self) -> None: ...
    async def delete_task(self, task_id: str) -> None: ...
