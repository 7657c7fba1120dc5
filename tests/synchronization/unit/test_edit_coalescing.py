"""Edit coalescing tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

from apidoc_sync.synchronization import EditCoalescer


class _Handle:
    def __init__(self, due: float, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self.due = due
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class _ManualScheduler:
    """Virtual clock; callbacks run only when the test advances time."""

    def __init__(self, honour_cancel: bool = True) -> None:
        self.now = 0.0
        self.handles: list[_Handle] = []
        self._honour_cancel = honour_cancel

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> _Handle:
        handle = _Handle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = [handle for handle in self.handles if handle.due <= self.now]
        self.handles = [handle for handle in self.handles if handle.due > self.now]
        for handle in due:
            if handle.cancelled and self._honour_cancel:
                continue
            handle.callback(*handle.args)


def test_only_the_last_value_of_a_burst_is_delivered() -> None:
    scheduler = _ManualScheduler()
    delivered: list[str] = []
    coalescer = EditCoalescer(delivered.append, 0.5, scheduler)

    coalescer.submit("o")
    scheduler.advance(0.2)
    coalescer.submit("op")
    scheduler.advance(0.2)
    coalescer.submit("ope")
    scheduler.advance(0.4)

    assert delivered == []
    assert coalescer.pending

    scheduler.advance(0.2)

    assert delivered == ["ope"]
    assert not coalescer.pending


def test_cancel_discards_the_pending_value() -> None:
    scheduler = _ManualScheduler()
    delivered: list[str] = []
    coalescer = EditCoalescer(delivered.append, 0.5, scheduler)

    coalescer.submit("draft")
    coalescer.cancel()
    scheduler.advance(1.0)

    assert delivered == []
    assert not coalescer.pending


def test_flush_delivers_immediately_once() -> None:
    scheduler = _ManualScheduler()
    delivered: list[str] = []
    coalescer = EditCoalescer(delivered.append, 0.5, scheduler)

    coalescer.submit("draft")

    assert coalescer.flush() is True
    assert coalescer.flush() is False
    scheduler.advance(1.0)
    assert delivered == ["draft"]


def test_superseded_callback_has_no_effect_even_if_it_fires() -> None:
    scheduler = _ManualScheduler(honour_cancel=False)
    delivered: list[str] = []
    coalescer = EditCoalescer(delivered.append, 0.5, scheduler)

    coalescer.submit("first")
    coalescer.submit("second")
    scheduler.advance(1.0)

    assert delivered == ["second"]


def test_running_event_loop_is_the_default_scheduler() -> None:
    delivered: list[str] = []

    async def _scenario() -> None:
        coalescer: EditCoalescer[str] = EditCoalescer(delivered.append, 0.01)
        coalescer.submit("first")
        coalescer.submit("second")
        await asyncio.sleep(0.1)

    asyncio.run(_scenario())

    assert delivered == ["second"]


def test_without_scheduler_or_running_loop_values_are_delivered_at_once() -> None:
    delivered: list[str] = []
    coalescer: EditCoalescer[str] = EditCoalescer(delivered.append, 0.5)

    coalescer.submit("first")
    coalescer.submit("second")

    assert delivered == ["first", "second"]
    assert not coalescer.pending
    assert coalescer.flush() is False
