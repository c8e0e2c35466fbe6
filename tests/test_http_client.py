# tests/test_http_client.py

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from todo_remote.core.errors import DecodeError
from todo_remote.remote.http_client import ACCEPT_HEADER, build_http_client
from todo_remote.remote.tasks_api import TasksApi
from todo_remote.tasks.task_models import TaskRequest

from .fakes import FakeBackend


def test_requires_server_url(settings: SimpleNamespace) -> None:
    settings.server_url = "  "

    with pytest.raises(RuntimeError, match="TODO_SERVER_URL"):
        build_http_client(settings)


@pytest.mark.asyncio
async def test_client_uses_base_url_and_accept_header(settings: SimpleNamespace, backend: FakeBackend) -> None:
    client = build_http_client(settings, transport=backend.transport)
    try:
        await TasksApi(client).list_tasks()
    finally:
        await client.aclose()

    (req,) = backend.requests
    assert str(req.url) == "https://tasks.test/api/tasks"
    assert req.headers["accept"] == ACCEPT_HEADER


@pytest.mark.asyncio
async def test_wire_logging_includes_bodies(settings: SimpleNamespace, backend: FakeBackend, caplog) -> None:
    client = build_http_client(settings, transport=backend.transport)
    try:
        with caplog.at_level(logging.DEBUG, logger="todo_remote.remote.http_client"):
            await TasksApi(client).create_task(TaskRequest(title="Logged", description="body"))
    finally:
        await client.aclose()

    lines = [r.getMessage() for r in caplog.records if r.name == "todo_remote.remote.http_client"]
    assert any(line.startswith("--> POST") and '"Logged"' in line for line in lines)
    assert any(line.startswith("<-- 201 POST") and "srv-1" in line for line in lines)


@pytest.mark.asyncio
async def test_wire_logging_hook_does_not_leak_decoding_errors(
    settings: SimpleNamespace, backend: FakeBackend
) -> None:
    backend.bad_encoding = True
    client = build_http_client(settings, transport=backend.transport)
    try:
        with pytest.raises(DecodeError):
            await TasksApi(client).list_tasks()
    finally:
        await client.aclose()
