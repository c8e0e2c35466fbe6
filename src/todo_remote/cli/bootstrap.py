# src/todo_remote/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the shared HTTP client, the typed API and the seed store into a RemoteTaskStore,
- closes what it opened on shutdown.
"""

from __future__ import annotations

import logging

import httpx

from ..config import get_settings
from ..core.state import AppState
from ..remote.http_client import build_http_client
from ..remote.remote_data_source import RemoteTaskStore
from ..remote.tasks_api import TasksApi
from ..tasks.seed_store import SeedTaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    client = build_http_client(settings, transport=transport)
    store = RemoteTaskStore(
        TasksApi(client),
        seed_store=SeedTaskStore.with_examples(),
        latency_seconds=settings.service_latency_seconds,
    )
    return AppState(settings=settings, http_client=client, store=store)


async def aclose_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        await state.http_client.aclose()
    except Exception:
        logger.debug("HTTP client close failed.", exc_info=True)
