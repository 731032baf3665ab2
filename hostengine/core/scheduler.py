"""
Delay schedulers - "run this callback after N seconds".

Two flavours:
- FrameScheduler: virtual clock advanced by the host's game loop via
  update(dt). Deterministic, which is what tests and fixed-timestep
  hosts want.
- AsyncioScheduler: real time, backed by the running asyncio loop.

Usage:
    scheduler = FrameScheduler()
    scheduler.call_later(0.5, lambda: print("half a second later"))

    # In the game loop
    scheduler.update(dt)
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol


class CallHandle(Protocol):
    """Anything returned by call_later that can be cancelled."""

    def cancel(self) -> None: ...


class Scheduler(ABC):
    """Base class for delay schedulers."""

    @abstractmethod
    def now(self) -> float:
        """Current scheduler time in seconds."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> CallHandle:
        """Run callback once, delay seconds from now."""


@dataclass(order=True)
class ScheduledCall:
    """A pending FrameScheduler call."""
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class FrameScheduler(Scheduler):
    """
    Scheduler driven by explicit time steps.

    Due calls fire in due-time order. While a call runs, now() reports
    that call's due time, so chained delays do not drift with frame size.
    """

    def __init__(self, start_time: float = 0.0):
        self._time = start_time
        self._queue: list[ScheduledCall] = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._time

    @property
    def pending(self) -> int:
        """Number of calls still waiting to fire."""
        return sum(1 for call in self._queue if not call.cancelled)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(
            due=self._time + max(0.0, delay),
            seq=next(self._counter),
            callback=callback,
        )
        heapq.heappush(self._queue, call)
        return call

    def update(self, dt: float) -> None:
        """
        Advance the clock by dt seconds, firing everything that comes due.

        Args:
            dt: Delta time in seconds
        """
        self._advance_to(self._time + dt)

    def drain(self, max_steps: int = 100_000) -> None:
        """Jump the clock forward until no calls are pending."""
        for _ in range(max_steps):
            while self._queue and self._queue[0].cancelled:
                heapq.heappop(self._queue)
            if not self._queue:
                return
            self._advance_to(self._queue[0].due)
        raise RuntimeError(f"FrameScheduler still busy after {max_steps} steps")

    def _advance_to(self, target: float) -> None:
        while self._queue and self._queue[0].due <= target:
            call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self._time = call.due
            call.callback()

        self._time = max(self._time, target)


class AsyncioScheduler(Scheduler):
    """Real-time scheduler on top of an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            return asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time()

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0.0, delay), callback)
