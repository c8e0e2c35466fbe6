# src/todo_remote/remote/tasks_api.py

from __future__ import annotations

"""
Typed client for the tasks REST API.

| Method | Path                       | Body                 |
|--------|----------------------------|----------------------|
| GET    | /api/tasks                 | -                    |
| POST   | /api/tasks                 | {title, description} |
| PATCH  | /api/tasks/{id}/complete   | -                    |
| DELETE | /api/tasks/{id}/delete     | -                    |

httpx exceptions never leave this module: request failures and non-2xx statuses
become NetworkError; bad JSON, a wrong shape or an undecodable body become DecodeError.
"""

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..core.errors import DecodeError, NetworkError
from ..tasks.task_models import TaskListResponse, TaskRequest, TaskResponse

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"


def _task_path(task_id: str, action: str) -> str:
    return f"{TASKS_PATH}/{quote(str(task_id), safe='')}/{action}"


class TasksApi:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def _send(self, method: str, path: str, *, json_body: Any = None) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, json=json_body)
        except httpx.TimeoutException as e:
            raise NetworkError(f"{method} {path} timed out") from e
        except httpx.DecodingError as e:
            # Body arrived but its Content-Encoding could not be undone.
            raise DecodeError(f"{method} {path}: undecodable response body: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"{method} {path} failed: {e.__class__.__name__}: {e}") from e

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"{method} {path} returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            ) from e
        return resp

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(
                f"{resp.request.method} {resp.request.url.path}: response is not valid JSON"
            ) from e

    async def list_tasks(self) -> TaskListResponse:
        resp = await self._send("GET", TASKS_PATH)
        return TaskListResponse.from_json(self._json(resp))

    async def create_task(self, request: TaskRequest) -> TaskResponse:
        resp = await self._send("POST", TASKS_PATH, json_body=request.to_json())
        return TaskResponse.from_json(self._json(resp))

    async def complete_task(self, task_id: str) -> None:
        await self._send("PATCH", _task_path(task_id, "complete"))

    async def delete_task(self, task_id: str) -> None:
        await self._send("DELETE", _task_path(task_id, "delete"))
