# src/todo_remote/core/errors.py

from __future__ import annotations


class TaskSourceError(Exception):
    """Base class for failures raised by task data sources."""


class NetworkError(TaskSourceError):
    """Transport failure or a non-2xx HTTP status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(TaskSourceError):
    """Response body does not match the expected wire shape."""


class NotFoundError(TaskSourceError):
    """Lookup miss (unknown task id)."""


def friendly_error_message(err: Exception) -> str:
    msg = str(err).strip()
    if isinstance(err, NetworkError):
        if err.status_code is not None:
            return f"Backend error (HTTP {err.status_code}): {msg}"
        return f"Backend unreachable: {msg or 'network error'}"
    if isinstance(err, DecodeError):
        return f"Unexpected backend response: {msg or 'decode error'}"
    return msg or err.__class__.__name__
