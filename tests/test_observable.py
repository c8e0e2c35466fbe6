# tests/test_observable.py

from __future__ import annotations

import logging

from todo_remote.core.observable import MutableObservable


def test_no_value_until_first_publish() -> None:
    obs: MutableObservable[int] = MutableObservable()
    seen: list[int] = []

    obs.subscribe(seen.append)

    assert not obs.has_value
    assert obs.value is None
    assert seen == []

    obs.publish(1)
    obs.publish(2)
    assert seen == [1, 2]
    assert obs.value == 2


def test_late_subscriber_gets_current_value() -> None:
    obs: MutableObservable[str] = MutableObservable()
    obs.publish("hello")

    seen: list[str] = []
    obs.subscribe(seen.append)

    assert seen == ["hello"]


def test_dispose_stops_updates_and_is_idempotent() -> None:
    obs: MutableObservable[int] = MutableObservable()
    seen: list[int] = []
    sub = obs.subscribe(seen.append)

    obs.publish(1)
    sub.dispose()
    sub.dispose()
    obs.publish(2)

    assert seen == [1]
    assert sub.disposed
    assert obs.subscriber_count == 0


def test_failing_subscriber_does_not_block_others(caplog) -> None:
    obs: MutableObservable[int] = MutableObservable()
    seen: list[int] = []

    def broken(_: int) -> None:
        raise RuntimeError("subscriber bug")

    obs.subscribe(broken)
    obs.subscribe(seen.append)

    with caplog.at_level(logging.ERROR, logger="todo_remote.core.observable"):
        obs.publish(7)

    assert seen == [7]
    assert any("failed" in r.getMessage() for r in caplog.records)


def test_map_recomputes_on_every_publish() -> None:
    obs: MutableObservable[int] = MutableObservable()
    calls: list[int] = []

    def double(x: int) -> int:
        calls.append(x)
        return x * 2

    derived = obs.map(double)
    seen: list[int] = []
    derived.subscribe(seen.append)

    assert not derived.has_value
    assert derived.value is None

    obs.publish(1)
    obs.publish(5)

    assert seen == [2, 10]
    assert derived.value == 10
    assert calls[:2] == [1, 5]


def test_publish_from_subscriber_supersedes_current_dispatch() -> None:
    obs: MutableObservable[int] = MutableObservable()
    first_seen: list[int] = []
    second_seen: list[int] = []

    def first(value: int) -> None:
        first_seen.append(value)
        if value == 1:
            obs.publish(2)

    obs.subscribe(first)
    obs.subscribe(second_seen.append)

    obs.publish(1)

    assert first_seen == [1, 2]
    assert second_seen == [2]
    assert obs.value == 2
