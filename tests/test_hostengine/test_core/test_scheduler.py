import asyncio
import pytest
from hostengine.core.scheduler import FrameScheduler, AsyncioScheduler


def test_calls_fire_when_due(scheduler):
    fired = []
    scheduler.call_later(0.5, lambda: fired.append("a"))

    scheduler.update(0.25)
    assert fired == []

    scheduler.update(0.25)
    assert fired == ["a"]
    assert scheduler.now() == 0.5

def test_calls_fire_in_due_order(scheduler):
    fired = []
    scheduler.call_later(1.0, lambda: fired.append("late"))
    scheduler.call_later(0.25, lambda: fired.append("early"))
    scheduler.call_later(0.25, lambda: fired.append("early-second"))

    scheduler.update(2.0)

    assert fired == ["early", "early-second", "late"]

def test_chained_calls_do_not_drift(scheduler):
    times = []

    def tick():
        times.append(scheduler.now())
        if len(times) < 4:
            scheduler.call_later(0.25, tick)

    scheduler.call_later(0.25, tick)
    # One big frame covers all four ticks
    scheduler.update(1.0)

    assert times == [0.25, 0.5, 0.75, 1.0]

def test_cancelled_call_does_not_fire(scheduler):
    fired = []
    handle = scheduler.call_later(0.5, lambda: fired.append("x"))
    assert scheduler.pending == 1

    handle.cancel()
    scheduler.update(1.0)

    assert fired == []
    assert scheduler.pending == 0

def test_negative_delay_fires_on_next_update(scheduler):
    fired = []
    scheduler.call_later(-1.0, lambda: fired.append("now"))
    scheduler.update(0.0)
    assert fired == ["now"]

def test_drain_runs_everything(scheduler):
    fired = []
    scheduler.call_later(3.0, lambda: fired.append(3))
    scheduler.call_later(1.0, lambda: fired.append(1))

    scheduler.drain()

    assert fired == [1, 3]
    assert scheduler.now() == 3.0
    assert scheduler.pending == 0

def test_drain_gives_up_on_endless_work():
    scheduler = FrameScheduler()

    def again():
        scheduler.call_later(1.0, again)

    scheduler.call_later(1.0, again)
    with pytest.raises(RuntimeError):
        scheduler.drain(max_steps=10)

def test_asyncio_scheduler_runs_callbacks():
    async def main():
        scheduler = AsyncioScheduler()
        done = asyncio.get_running_loop().create_future()
        start = scheduler.now()
        scheduler.call_later(0.01, lambda: done.set_result(scheduler.now() - start))
        return await asyncio.wait_for(done, timeout=2.0)

    elapsed = asyncio.run(main())
    assert elapsed >= 0.0
