# tests/test_stopwatch.py
import threading

import pytest

from journal_backend.app.brew.stopwatch import Stopwatch, StopwatchState, TimerRegistry, format_elapsed

def test_start_tick_pause_reset_cycle():
    sw = Stopwatch()
    assert sw.state is StopwatchState.IDLE
    sw.start()
    for _ in range(5):
        sw.tick()
    assert sw.elapsed_seconds == 5 and sw.running
    sw.pause()
    assert sw.state is StopwatchState.PAUSED and not sw.running
    sw.tick()
    assert sw.elapsed_seconds == 5
    sw.reset()
    assert sw.state is StopwatchState.IDLE
    assert sw.elapsed_seconds == 0 and not sw.running

def test_double_start_does_not_double_count():
    sw = Stopwatch()
    sw.start()
    sw.start()
    sw.tick()
    assert sw.elapsed_seconds == 1

def test_resume_keeps_elapsed():
    sw = Stopwatch()
    sw.start(); sw.tick(); sw.tick(); sw.pause()
    sw.start(); sw.tick()
    assert sw.elapsed_seconds == 3

def test_ticks_while_idle_are_ignored_and_pause_is_noop():
    sw = Stopwatch()
    sw.tick()
    sw.pause()
    assert sw.state is StopwatchState.IDLE and sw.elapsed_seconds == 0

def test_reset_from_running():
    sw = Stopwatch()
    sw.start(); sw.tick()
    sw.reset()
    assert sw.snapshot() == {"elapsed_seconds": 0, "running": False, "state": "idle", "display": "00:00"}

@pytest.mark.parametrize("secs,text", [(0, "00:00"), (59, "00:59"), (125, "02:05"), (6000, "100:00")])
def test_format(secs, text):
    assert format_elapsed(secs) == text
    assert Stopwatch.format(secs) == text

def test_registry_create_get_discard():
    reg = TimerRegistry()
    tid = reg.create()
    reg.get(tid).start()
    assert reg.create(tid) == tid
    assert reg.get(tid).running
    assert reg.discard(tid)
    assert not reg.discard(tid)
    with pytest.raises(KeyError):
        reg.get(tid)

def test_registry_evicts_least_recently_used_past_cap():
    reg = TimerRegistry(max_timers=2)
    reg.create("a")
    reg.create("b")
    reg.get("a")            # "b" is now the stalest
    reg.create("c")
    assert len(reg) == 2
    assert "a" in reg and "c" in reg and "b" not in reg

def test_registry_rejects_empty_cap():
    with pytest.raises(ValueError):
        TimerRegistry(max_timers=0)

def test_concurrent_ticks_are_all_counted():
    reg = TimerRegistry()
    tid = reg.create()
    reg.apply(tid, Stopwatch.start)

    def worker():
        for _ in range(50):
            reg.apply(tid, Stopwatch.tick)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert reg.snapshot(tid)["elapsed_seconds"] == 400
