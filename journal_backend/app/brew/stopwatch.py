# journal_backend/app/brew/stopwatch.py
from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from enum import Enum
from threading import RLock
from typing import Any, Callable, Dict, Optional

from journal_backend.app.config import MAX_TIMERS

# Purpose:
# Brew timer as a three-state machine (IDLE -> RUNNING <-> PAUSED -> IDLE).
# The clock that drives tick() lives outside (the frontend's 1s interval);
# this module only defines what one tick does.

log = logging.getLogger("journal.timers")
if not log.handlers:
    log.addHandler(logging.StreamHandler())
    log.setLevel(logging.INFO)


class StopwatchState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


def format_elapsed(seconds: int) -> str:
    """MM:SS with zero padding; minutes keep counting past 59."""
    s = max(0, int(seconds))
    minutes, secs = divmod(s, 60)
    return f"{minutes:02d}:{secs:02d}"


class Stopwatch:
    def __init__(self) -> None:
        self.elapsed_seconds: int = 0
        self.state: StopwatchState = StopwatchState.IDLE

    @property
    def running(self) -> bool:
        return self.state is StopwatchState.RUNNING

    def start(self) -> None:
        self.state = StopwatchState.RUNNING

    def pause(self) -> None:
        if self.state is StopwatchState.RUNNING:
            self.state = StopwatchState.PAUSED

    def reset(self) -> None:
        self.state = StopwatchState.IDLE
        self.elapsed_seconds = 0

    def tick(self) -> None:
        # ticks delivered while idle/paused are dropped
        if self.running:
            self.elapsed_seconds += 1

    format = staticmethod(format_elapsed)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "elapsed_seconds": self.elapsed_seconds,
            "running": self.running,
            "state": self.state.value,
            "display": format_elapsed(self.elapsed_seconds),
        }


class TimerRegistry:
    """
    One Stopwatch per active timer widget, keyed by id.

    Every read or mutation of a Stopwatch goes through the registry lock.
    The registry holds at most max_timers entries; creating one more evicts
    the least recently used timer.
    """

    def __init__(self, max_timers: int = 256) -> None:
        if max_timers < 1:
            raise ValueError("max_timers must be >= 1")
        self.max_timers = int(max_timers)
        self._lock = RLock()
        self._timers: "OrderedDict[str, Stopwatch]" = OrderedDict()

    def __len__(self) -> int:
        with self._lock:
            return len(self._timers)

    def __contains__(self, timer_id: object) -> bool:
        with self._lock:
            return timer_id in self._timers

    def _touch(self, timer_id: str) -> Stopwatch:
        sw = self._timers.get(timer_id)
        if sw is None:
            raise KeyError(f"timer not found: {timer_id}")
        self._timers.move_to_end(timer_id)
        return sw

    def create(self, timer_id: Optional[str] = None) -> str:
        tid = timer_id or uuid.uuid4().hex
        with self._lock:
            if tid in self._timers:
                self._timers.move_to_end(tid)
                return tid
            self._timers[tid] = Stopwatch()
            while len(self._timers) > self.max_timers:
                evicted, _ = self._timers.popitem(last=False)
                log.info(f"[timers] evicted least recently used timer {evicted}")
        return tid

    def get(self, timer_id: str) -> Stopwatch:
        with self._lock:
            return self._touch(timer_id)

    def apply(self, timer_id: str, fn: Callable[[Stopwatch], Any]) -> Dict[str, Any]:
        """Run fn on the timer under the lock; returns the resulting snapshot."""
        with self._lock:
            sw = self._touch(timer_id)
            fn(sw)
            return sw.snapshot()

    def snapshot(self, timer_id: str) -> Dict[str, Any]:
        with self._lock:
            return self._touch(timer_id).snapshot()

    def discard(self, timer_id: str) -> bool:
        with self._lock:
            return self._timers.pop(timer_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._timers.clear()


TIMERS = TimerRegistry(max_timers=MAX_TIMERS)
