# src/todo_remote/remote/http_client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# The backend may answer with HAL-flavoured JSON; both decode the same way.
ACCEPT_HEADER = "application/json, application/hal+json"


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=10.0,
        pool=connect_s,
    )


def _make_event_hooks(log_bodies: bool) -> dict[str, list[Any]]:
    """
    Request/response wire logging (DEBUG).

    With log_bodies=True request and response bodies are dumped too, which is what
    you want while poking at the backend and what you don't want in production.
    """

    async def on_request(request: httpx.Request) -> None:
        if log_bodies and request.content:
            logger.debug(
                "--> %s %s %s",
                request.method,
                request.url,
                request.content.decode("utf-8", errors="replace"),
            )
        else:
            logger.debug("--> %s %s", request.method, request.url)

    async def on_response(response: httpx.Response) -> None:
        req = response.request
        if log_bodies:
            await response.aread()
            logger.debug(
                "<-- %s %s %s %s",
                response.status_code,
                req.method,
                req.url,
                response.text,
            )
        else:
            logger.debug("<-- %s %s %s", response.status_code, req.method, req.url)

    return {"request": [on_request], "response": [on_response]}


def build_http_client(
    settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the shared async HTTP client for the tasks backend.

    IMPORTANT:
    - One client per process/app state; close it with `await client.aclose()`.
    - No retries: every call is attempted exactly once.
    - `transport` is for tests (httpx.MockTransport).
    """
    base_url = str(getattr(settings, "server_url", "") or "").strip()
    if not base_url:
        raise RuntimeError("Backend URL is not set. Set TODO_SERVER_URL in your .env.")

    timeout = _make_timeout(
        connect_s=float(getattr(settings, "http_connect_timeout", 5.0)),
        read_s=float(getattr(settings, "http_read_timeout", 25.0)),
    )
    log_bodies = bool(getattr(settings, "http_log_bodies", False))

    client = httpx.AsyncClient(
        base_url=base_url,
        headers={"Accept": ACCEPT_HEADER},
        timeout=timeout,
        event_hooks=_make_event_hooks(log_bodies),
        transport=transport,
    )
    logger.info("HTTP client ready base_url=%s log_bodies=%s", base_url, log_bodies)
    return client
