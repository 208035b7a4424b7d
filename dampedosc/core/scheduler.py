"""
Schedulers for the playback timer.

Interface: schedule_repeating(period, callback) -> CancelHandle.
ManualScheduler runs on a virtual clock (tests, offline replay);
ThreadingScheduler fires callbacks from a daemon thread in wall-clock time.
"""

import logging
import math
import threading
from abc import ABC, abstractmethod
from typing import Callable, List

from dampedosc.core.errors import InvalidParameter

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


def _check_period(period: float) -> float:
    period = float(period)
    if not math.isfinite(period) or period <= 0:
        raise InvalidParameter(f"period must be > 0, got {period}", "period", period)
    return period


class CancelHandle(ABC):
    """Handle of a repeating schedule."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop the schedule; idempotent."""
        pass

    @property
    @abstractmethod
    def active(self) -> bool:
        pass


class Scheduler(ABC):
    """Installs repeating callbacks."""

    @abstractmethod
    def schedule_repeating(self, period: float, callback: Callback) -> CancelHandle:
        """
        Call callback every period seconds until the handle is cancelled.

        Raises:
            InvalidParameter: period <= 0 or not finite.
        """
        pass


class _ManualHandle(CancelHandle):
    def __init__(self, period: float, callback: Callback, origin: float) -> None:
        self.period = period
        self.callback = callback
        self.origin = origin
        self.fired = 0
        self._active = True

    @property
    def next_due(self) -> float:
        return self.origin + (self.fired + 1) * self.period

    def cancel(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active


class ManualScheduler(Scheduler):
    """
    Scheduler a tempo virtuale: i callback scattano solo dentro advance().
    Nessuna attesa reale, adatto ai test.
    """

    # Tolerance on due times, absorbs rounding of origin + n * period
    EPS = 1e-9

    def __init__(self) -> None:
        self._now = 0.0
        self._handles: List[_ManualHandle] = []

    @property
    def now(self) -> float:
        return self._now

    @property
    def active_count(self) -> int:
        """Number of schedules not yet cancelled."""
        return sum(1 for h in self._handles if h.active)

    def schedule_repeating(self, period: float, callback: Callback) -> CancelHandle:
        handle = _ManualHandle(_check_period(period), callback, self._now)
        self._handles.append(handle)
        return handle

    def advance(self, seconds: float) -> int:
        """
        Move the virtual clock forward, firing every due callback in time order.
        Callbacks may cancel or install schedules. Returns the number of calls.
        """
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")
        target = self._now + seconds
        calls = 0
        while True:
            self._handles = [h for h in self._handles if h.active]
            due = [h for h in self._handles if h.next_due <= target + self.EPS]
            if not due:
                break
            handle = min(due, key=lambda h: h.next_due)
            self._now = max(self._now, handle.next_due)
            handle.fired += 1
            handle.callback()
            calls += 1
        self._now = target
        return calls


class _ThreadHandle(CancelHandle):
    def __init__(self, period: float, callback: Callback) -> None:
        self.period = period
        self.callback = callback
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="dampedosc-timer", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        while not self._stop.wait(self.period):
            # cancel() may land between the wait and the call
            if self._stop.is_set():
                break
            try:
                self.callback()
            except Exception:
                logger.exception("Timer callback failed, stopping schedule")
                self._stop.set()

    def cancel(self) -> None:
        self._stop.set()

    @property
    def active(self) -> bool:
        return not self._stop.is_set()


class ThreadingScheduler(Scheduler):
    """Wall-clock scheduler: one daemon thread per repeating schedule."""

    def schedule_repeating(self, period: float, callback: Callback) -> CancelHandle:
        handle = _ThreadHandle(_check_period(period), callback)
        handle.start()
        return handle
