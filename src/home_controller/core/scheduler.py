"""
Timer scheduling for delayed, one-shot device actions.

Decorators never block the caller: they hand an action to a Scheduler and
keep the returned TimerHandle so the action can be cancelled before it runs.

Two implementations are provided:
- ThreadingScheduler: real time, one daemon thread per pending action
- ManualScheduler: virtual clock advanced explicitly (tests, simulations)
"""

import heapq
import itertools
import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, UTC
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


Action = Callable[[], None]


class TimerHandle(ABC):
    """A pending one-shot action that may still be cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the action if it has not run yet. Safe to call repeatedly."""
        pass

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """True once cancel() has been called."""
        pass


class Scheduler(ABC):
    """
    Abstract interface for running an action once after a delay.

    Implementations must not run the action on the caller's stack from
    schedule() itself.
    """

    @abstractmethod
    def schedule(self, delay_seconds: float, action: Action) -> TimerHandle:
        """
        Run an action once after a delay.

        Args:
            delay_seconds: Seconds to wait (>= 0)
            action: Zero-argument callable to run

        Returns:
            Handle that can cancel the action before it runs
        """
        pass

    @abstractmethod
    def now(self) -> datetime:
        """
        Get the scheduler's current time.

        Returns:
            Current datetime (timezone-aware)
        """
        pass


def _run_action(action: Action) -> None:
    try:
        action()
    except Exception as e:
        logger.error(f"Error in scheduled action {action!r}: {e}", exc_info=True)


# =============================================================================
# Real-time scheduler
# =============================================================================


class _ThreadTimerHandle(TimerHandle):
    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ThreadingScheduler(Scheduler):
    """
    Scheduler backed by threading.Timer.

    Every scheduled action runs on its own daemon thread, so pending timers
    never keep the process alive.
    """

    def schedule(self, delay_seconds: float, action: Action) -> TimerHandle:
        if delay_seconds < 0:
            raise ValueError(f"Delay must be non-negative, got {delay_seconds}")

        timer = threading.Timer(delay_seconds, _run_action, args=(action,))
        timer.daemon = True
        timer.start()

        logger.debug(f"Scheduled action in {delay_seconds:.1f}s")
        return _ThreadTimerHandle(timer)

    def now(self) -> datetime:
        return datetime.now(UTC)


# =============================================================================
# Virtual-clock scheduler
# =============================================================================


class _ManualTimerHandle(TimerHandle):
    def __init__(self, due: datetime) -> None:
        self.due = due
        self.fired = False
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler(Scheduler):
    """
    Scheduler driven by an explicit virtual clock.

    Nothing runs until advance() is called. Due actions run in due-time
    order (ties in scheduling order) and the clock is set to each action's
    due time before it runs, so code that reads now() inside an action sees
    the firing time.

    Example:
        scheduler = ManualScheduler()
        scheduler.schedule(60, callback)
        scheduler.advance(59)   # nothing runs
        scheduler.advance(1)    # callback runs
    """

    def __init__(self, start: Optional[datetime] = None) -> None:
        self._now = start or datetime(2025, 1, 1, tzinfo=UTC)
        self._queue: List[Tuple[datetime, int, _ManualTimerHandle, Action]] = []
        self._counter = itertools.count()
        self._lock = threading.RLock()

    def schedule(self, delay_seconds: float, action: Action) -> TimerHandle:
        if delay_seconds < 0:
            raise ValueError(f"Delay must be non-negative, got {delay_seconds}")

        with self._lock:
            due = self._now + timedelta(seconds=delay_seconds)
            handle = _ManualTimerHandle(due)
            heapq.heappush(self._queue, (due, next(self._counter), handle, action))
        return handle

    def now(self) -> datetime:
        return self._now

    @property
    def pending(self) -> int:
        """Number of actions that are neither cancelled nor run."""
        with self._lock:
            return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and run every action that becomes due.

        Actions scheduled by running actions are also run if they fall due
        within the window.

        Args:
            seconds: How far to move the clock

        Returns:
            Number of actions run
        """
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards ({seconds}s)")

        target = self._now + timedelta(seconds=seconds)
        ran = 0

        while True:
            with self._lock:
                if not self._queue or self._queue[0][0] > target:
                    break
                due, _, handle, action = heapq.heappop(self._queue)
                if handle.cancelled:
                    continue
                self._now = max(self._now, due)
                handle.fired = True

            _run_action(action)
            ran += 1

        self._now = target
        return ran
