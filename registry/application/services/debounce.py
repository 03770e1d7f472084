"""Debounce a rapidly changing value on the asyncio event loop.

Each push restarts a quiescence window; the callback only runs once the
value has been held stable for the whole window. Used by the writer browser
so typing in the search box issues one read, not one per keystroke.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


class Debouncer(Generic[T]):
    """Deliver the last pushed value after delay_ms of quiescence.

    The delivered value is always one that was actually pushed and then
    held stable; intermediate values are dropped. Once delivery has started
    a later push does not cancel it, it only schedules the next delivery.
    """

    def __init__(
        self,
        delay_ms: int,
        callback: Callable[[T], Awaitable[None]],
    ) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got: {delay_ms}")
        self._delay = delay_ms / 1000.0
        self._callback = callback
        self._timer: asyncio.Task[None] | None = None
        self._pending: object = _UNSET
        self._value: object = _UNSET
        self._deliveries: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> bool:
        """True while a value is waiting for its window to elapse."""
        return self._pending is not _UNSET

    @property
    def value(self) -> T | None:
        """Last value delivered to the callback (None before the first delivery)."""
        return None if self._value is _UNSET else self._value  # type: ignore[return-value]

    def push(self, value: T) -> None:
        """Record a new value and restart the quiescence window."""
        self._cancel_timer()
        self._pending = value
        self._timer = asyncio.get_running_loop().create_task(self._wait_then_deliver())

    def cancel(self) -> None:
        """Drop the pending value without delivering it."""
        self._cancel_timer()
        self._pending = _UNSET

    async def flush(self) -> None:
        """Deliver the pending value now (no-op when nothing is pending)."""
        self._cancel_timer()
        if self._pending is _UNSET:
            return
        await self._deliver()

    async def wait(self) -> None:
        """Wait until the pending window and any in-flight delivery finish."""
        while self._timer is not None or self._deliveries:
            if self._timer is not None:
                await asyncio.gather(self._timer, return_exceptions=True)
            if self._deliveries:
                await asyncio.gather(*self._deliveries, return_exceptions=True)

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    async def _wait_then_deliver(self) -> None:
        await asyncio.sleep(self._delay)
        # Window elapsed: from here on the delivery runs detached from the
        # timer so a new push cannot cancel it half-way.
        self._timer = None
        task = asyncio.get_running_loop().create_task(self._deliver())
        self._deliveries.add(task)
        task.add_done_callback(self._deliveries.discard)

    async def _deliver(self) -> None:
        value = self._pending
        self._pending = _UNSET
        if value is _UNSET:
            return
        self._value = value
        try:
            await self._callback(value)  # type: ignore[arg-type]
        except Exception:
            logger.exception("Debounced callback failed")
