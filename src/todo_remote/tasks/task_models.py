# src/todo_remote/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from ..core.errors import DecodeError


def _new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(slots=True)
class Task:
    """
    A to-do item.

    Identity is `id`; records are replaced as a whole, never patched field by field
    (the backend's "complete" endpoint is the only partial update).
    """

    title: str
    description: str = ""
    is_completed: bool = False
    id: str = field(default_factory=_new_task_id)

    @property
    def is_active(self) -> bool:
        return not self.is_completed

    @property
    def is_empty(self) -> bool:
        return not self.title.strip() and not self.description.strip()

    @property
    def title_for_list(self) -> str:
        return self.title if self.title.strip() else self.description


# ---- wire format ----


def _require(raw: dict[str, Any], key: str, kind: type, where: str) -> Any:
    if key not in raw:
        raise DecodeError(f"{where}: missing field '{key}'")
    val = raw[key]
    if not isinstance(val, kind):
        raise DecodeError(f"{where}: field '{key}' must be {kind.__name__}, got {type(val).__name__}")
    return val


@dataclass(frozen=True, slots=True)
class TaskRequest:
    """POST body. Only title and description travel; the server assigns id and status."""

    title: str
    description: str

    @classmethod
    def from_task(cls, task: Task) -> TaskRequest:
        return cls(title=task.title, description=task.description)

    def to_json(self) -> dict[str, str]:
        return {"title": self.title, "description": self.description}


@dataclass(frozen=True, slots=True)
class TaskResponse:
    id: str
    title: str
    description: str
    completed: bool

    @classmethod
    def from_json(cls, raw: Any) -> TaskResponse:
        if not isinstance(raw, dict):
            raise DecodeError(f"task: expected object, got {type(raw).__name__}")
        return cls(
            id=_require(raw, "id", str, "task"),
            title=_require(raw, "title", str, "task"),
            description=_require(raw, "description", str, "task"),
            completed=_require(raw, "completed", bool, "task"),
        )

    def to_task(self) -> Task:
        return Task(
            title=self.title,
            description=self.description,
            is_completed=self.completed,
            id=self.id,
        )


@dataclass(frozen=True, slots=True)
class TaskListResponse:
    data: list[TaskResponse]

    @classmethod
    def from_json(cls, raw: Any) -> TaskListResponse:
        if not isinstance(raw, dict):
            raise DecodeError(f"task list: expected object, got {type(raw).__name__}")
        items = _require(raw, "data", list, "task list")
        return cls(data=[TaskResponse.from_json(item) for item in items])

    def to_tasks(self) -> list[Task]:
        return [item.to_task() for item in self.data]
