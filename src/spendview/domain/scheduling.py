"""Deferred-callback scheduling used for notification lifetimes."""

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, UTC
from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):
    """Cancellation token returned by ``Scheduler.call_later``."""

    def cancel(self) -> None: ...


class Scheduler(ABC):
    """Abstract scheduler for callbacks that run later on the same loop."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` after ``delay`` seconds. Returns a cancellable handle."""
        pass

    @abstractmethod
    def now(self) -> datetime:
        """Current time on this scheduler's clock."""
        pass


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """Initialize asyncio scheduler.

        Args:
            loop: Event loop to schedule on. If None, the running loop is
                looked up on each call, so the scheduler can be created
                before the loop starts.
        """
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self._get_loop().call_later(max(delay, 0), callback)

    def now(self) -> datetime:
        return datetime.now(UTC)


class ManualTimer:
    """Handle for a callback scheduled on a ``ManualScheduler``."""

    def __init__(self, deadline: float, callback: Callable[[], None]):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Scheduler driven by a virtual clock.

    Time only moves when ``advance`` is called. Due callbacks fire in deadline
    order; callbacks sharing a deadline fire in the order they were scheduled.
    """

    def __init__(self, start: Optional[datetime] = None):
        self._start = start or datetime.now(UTC)
        self._elapsed = 0.0
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._sequence = itertools.count()

    @property
    def elapsed(self) -> float:
        """Seconds advanced since creation."""
        return self._elapsed

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self._elapsed + max(delay, 0), callback)
        heapq.heappush(self._queue, (timer.deadline, next(self._sequence), timer))
        return timer

    def now(self) -> datetime:
        return self._start + timedelta(seconds=self._elapsed)

    def pending(self) -> int:
        """Number of timers that have neither fired nor been cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every callback that falls due.

        Callbacks scheduled by a firing callback run in the same call if their
        deadline is within the advanced range.

        Returns:
            Number of callbacks fired
        """
        target = self._elapsed + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._elapsed = deadline
            timer.callback()
            fired += 1
        self._elapsed = target
        return fired
