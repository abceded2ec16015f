"""
Cooperative scheduler.

All work runs on one thread. Timers fire only when the host advances the
virtual clock, so debounce and throttling are deterministic.
"""

import heapq
import itertools
from typing import Any, Callable, List, Optional, Tuple


class Timer:
    """Handle for a scheduled callback."""

    def __init__(self, due: float, callback: Callable[[], Any]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class CooperativeScheduler:
    """
    Single-threaded timer queue with a virtual clock.

    Example:
        scheduler = CooperativeScheduler()
        scheduler.call_later(0.12, apply_query)
        scheduler.advance(0.2)  # apply_query runs here
    """

    def __init__(self, start: float = 0.0):
        self._now = start
        self._queue: List[Tuple[float, int, Timer]] = []
        self._sequence = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], Any]) -> Timer:
        timer = Timer(self._now + max(0.0, delay), callback)
        heapq.heappush(self._queue, (timer.due, next(self._sequence), timer))
        return timer

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing due timers in order.

        Returns:
            Number of callbacks run
        """
        target = self._now + max(0.0, seconds)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = due
            timer.fired = True
            timer.callback()
            fired += 1
        self._now = target
        return fired

    def pending(self) -> int:
        return sum(1 for _, _, timer in self._queue if timer.pending)


class Debouncer:
    """
    Coalescing single-shot timer.

    Each ``call`` cancels the pending invocation and reschedules, so only the
    last call within ``delay`` seconds runs.
    """

    def __init__(self, scheduler: CooperativeScheduler, delay: float, callback: Callable[..., Any]):
        self.scheduler = scheduler
        self.delay = delay
        self.callback = callback
        self._timer: Optional[Timer] = None
        self._args: tuple = ()

    def call(self, *args) -> None:
        self.cancel()
        self._args = args
        self._timer = self.scheduler.call_later(self.delay, self._fire)

    def _fire(self) -> None:
        self._timer = None
        self.callback(*self._args)

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def flush(self) -> None:
        """Run the pending invocation now, if any."""
        if self._timer is not None:
            self.cancel()
            self.callback(*self._args)

    @property
    def pending(self) -> bool:
        return self._timer is not None
