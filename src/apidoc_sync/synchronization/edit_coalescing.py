"""Coalescing of rapid edits into one deferred callback."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CancellableHandle(Protocol):
    def cancel(self) -> None: ...


class CallLaterScheduler(Protocol):
    """Anything able to run a callback after a delay; asyncio loops qualify."""

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> CancellableHandle: ...


class EditCoalescer(Generic[T]):
    """Deliver only the last submitted value once no newer one arrived for ``delay_seconds``.

    Each ``submit`` cancels the pending callback and schedules a new one. A
    callback that fires after being superseded is ignored, so a cancelled
    delivery never has partial effects. Without an explicit scheduler the
    running asyncio loop is used; with neither, values are delivered at once.
    """

    def __init__(
        self,
        callback: Callable[[T], None],
        delay_seconds: float,
        scheduler: CallLaterScheduler | None = None,
    ) -> None:
        self._callback = callback
        self._delay_seconds = delay_seconds
        self._scheduler = scheduler
        self._handle: CancellableHandle | None = None
        self._pending_value: T | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def submit(self, value: T) -> None:
        scheduler = self._resolve_scheduler()
        self.cancel()
        self._generation += 1
        if scheduler is None:
            logger.debug("No scheduler or running event loop; delivering without delay.")
            self._callback(value)
            return
        self._pending_value = value
        self._handle = scheduler.call_later(
            self._delay_seconds, self._deliver, self._generation
        )

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending_value = None

    def flush(self) -> bool:
        """Deliver a pending value immediately; return False when nothing was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._deliver(self._generation)
        return True

    def _deliver(self, generation: int) -> None:
        if generation != self._generation or self._handle is None:
            return
        value = self._pending_value
        self._handle = None
        self._pending_value = None
        self._callback(value)  # type: ignore[arg-type]

    def _resolve_scheduler(self) -> CallLaterScheduler | None:
        if self._scheduler is not None:
            return self._scheduler
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None
