# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_remote.cli.bootstrap import create_initial_state
from todo_remote.core.state import AppState
from todo_remote.remote.remote_data_source import RemoteTaskStore
from todo_remote.remote.tasks_api import TasksApi
from todo_remote.tasks.seed_store import SeedTaskStore

from .fakes import FakeBackend, task_json


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the HTTP client factory.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        server_url="https://tasks.test",
        service_latency_ms=0,
        service_latency_seconds=0.0,
        http_connect_timeout=1.0,
        http_read_timeout=1.0,
        http_log_bodies=True,
    )


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend(
        [
            task_json("t1", "Build tower in Pisa", description="Ground looks good."),
            task_json("t2", "Finish bridge in Tacoma", completed=True),
        ]
    )


@pytest.fixture()
def store(backend: FakeBackend) -> RemoteTaskStore:
    """RemoteTaskStore over the fake backend, with an empty seed store and no latency."""
    return RemoteTaskStore(
        TasksApi(backend.client()),
        seed_store=SeedTaskStore(),
        latency_seconds=0.0,
    )


@pytest.fixture()
def state(settings: SimpleNamespace, backend: FakeBackend) -> AppState:
    """AppState wired by the real composition root, talking to the fake backend."""
    return create_initial_state(settings=settings, transport=backend.transport)
