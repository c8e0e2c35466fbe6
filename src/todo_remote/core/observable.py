# src/todo_remote/core/observable.py

"""
Minimal observable value holder for UI-facing streams.

Semantics:
- An observable starts empty; subscribers see nothing until the first publish.
- A subscriber joining later receives the current value immediately.
- publish() stores the value and notifies subscribers synchronously, in order.
  A publish made from inside a subscriber supersedes the one being dispatched:
  remaining subscribers only see the newest value.
  A failing subscriber is logged and skipped; the publisher never sees its error.
- map() returns a stateless derived view, recomputed on every upstream publish.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Callback = Callable[[T], None]


class Subscription:
    def __init__(self, on_dispose: Callable[[], None]) -> None:
        self._on_dispose: Callable[[], None] | None = on_dispose

    @property
    def disposed(self) -> bool:
        return self._on_dispose is None

    def dispose(self) -> None:
        """Stop receiving updates. Safe to call more than once."""
        cb, self._on_dispose = self._on_dispose, None
        if cb is not None:
            cb()


class Observable(Generic[T]):
    """Read-only view of a value that changes over time."""

    @property
    def has_value(self) -> bool:
        raise NotImplementedError

    @property
    def value(self) -> T | None:
        raise NotImplementedError

    def subscribe(self, callback: Callback[T]) -> Subscription:
        raise NotImplementedError

    def map(self, fn: Callable[[T], R]) -> Observable[R]:
        return _MappedObservable(self, fn)


class MutableObservable(Observable[T]):
    def __init__(self) -> None:
        self._has_value = False
        self._value: T | None = None
        self._version = 0
        self._subscribers: list[Callback[T]] = []

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Callback[T]) -> Subscription:
        self._subscribers.append(callback)

        def _remove() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

        sub = Subscription(_remove)
        if self._has_value:
            _deliver(callback, self._value)  # type: ignore[arg-type]
        return sub

    def publish(self, value: T) -> None:
        self._value = value
        self._has_value = True
        self._version += 1
        version = self._version
        # Copy: a callback may dispose its own subscription while we iterate.
        for cb in list(self._subscribers):
            if self._version != version:
                # A subscriber published a newer value; that dispatch already reached everyone.
                break
            _deliver(cb, value)


class _MappedObservable(Observable[R], Generic[T, R]):
    def __init__(self, source: Observable[T], fn: Callable[[T], R]) -> None:
        self._source = source
        self._fn = fn

    @property
    def has_value(self) -> bool:
        return self._source.has_value

    @property
    def value(self) -> R | None:
        if not self._source.has_value:
            return None
        return self._fn(self._source.value)  # type: ignore[arg-type]

    def subscribe(self, callback: Callback[R]) -> Subscription:
        fn = self._fn

        def _forward(upstream: T) -> None:
            callback(fn(upstream))

        return self._source.subscribe(_forward)


def _deliver(callback: Callable[[T], None], value: T) -> None:
    try:
        callback(value)
    except Exception:
        logger.exception("Observable subscriber %r failed", callback)
