# app/routers/timers.py
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, HTTPException

from journal_backend.app.brew.stopwatch import TIMERS, Stopwatch
from journal_backend.app.schemas import TimerCreate, TimerOut

router = APIRouter(prefix="/timers", tags=["timers"])

# The frontend owns the 1s interval and posts /tick while the timer runs.
_ACTIONS = {
    "start": Stopwatch.start,
    "pause": Stopwatch.pause,
    "reset": Stopwatch.reset,
    "tick": Stopwatch.tick,
}


def _run(timer_id: str, fn: Optional[Callable[[Stopwatch], Any]] = None) -> Dict[str, Any]:
    try:
        snap = TIMERS.apply(timer_id, fn) if fn else TIMERS.snapshot(timer_id)
    except KeyError:
        raise HTTPException(404, "timer not found")
    return {"timer_id": timer_id, **snap}


@router.post("", response_model=TimerOut)
def create_timer(body: Optional[TimerCreate] = None):
    tid = TIMERS.create(body.timer_id if body else None)
    return _run(tid)


@router.get("/{timer_id}", response_model=TimerOut)
def read_timer(timer_id: str):
    return _run(timer_id)


@router.post("/{timer_id}/{action}", response_model=TimerOut)
def drive_timer(timer_id: str, action: str):
    fn = _ACTIONS.get(action)
    if fn is None:
        raise HTTPException(404, f"unknown timer action: {action}")
    return _run(timer_id, fn)


@router.delete("/{timer_id}")
def discard_timer(timer_id: str) -> Dict[str, Any]:
    if not TIMERS.discard(timer_id):
        raise HTTPException(404, "timer not found")
    return {"ok": True}
