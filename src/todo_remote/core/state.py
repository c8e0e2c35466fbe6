# src/todo_remote/core/state.py

from __future__ import annotations

from dataclasses import dataclass

import httpx

from ..config import Settings
from ..remote.remote_data_source import RemoteTaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Settings

    http_client: httpx.AsyncClient
    store: RemoteTaskStore
