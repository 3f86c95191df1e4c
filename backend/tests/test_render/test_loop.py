"""Tests for the asyncio animation loop and the resize debouncer."""

import asyncio

from sigil.render.loop import AnimationLoop, Debouncer


def test_loop_ticks_until_stopped():
    ticks = []

    async def scenario():
        loop = AnimationLoop(ticks.append, interval_ms=1, clock=lambda: 42.0)
        loop.start()
        loop.start()  # second start is a no-op
        assert loop.running
        await asyncio.sleep(0.05)
        loop.stop()
        count = len(ticks)
        await asyncio.sleep(0.02)
        return loop, count

    loop, count = asyncio.run(scenario())
    assert count > 1
    assert len(ticks) == count
    assert set(ticks) == {42.0}
    assert not loop.running
    assert loop.frames == count


def test_debouncer_coalesces_bursts():
    calls = []

    async def scenario():
        debounce = Debouncer(lambda *args: calls.append(args), delay_ms=20)
        for size in [(100, 100), (200, 150), (300, 200)]:
            debounce(*size)
            await asyncio.sleep(0.002)
        assert debounce.pending
        await asyncio.sleep(0.06)
        assert not debounce.pending

    asyncio.run(scenario())
    assert calls == [(300, 200)]


def test_debouncer_cancel():
    calls = []

    async def scenario():
        debounce = Debouncer(lambda: calls.append(1), delay_ms=10)
        debounce()
        debounce.cancel()
        await asyncio.sleep(0.03)

    asyncio.run(scenario())
    assert calls == []


def test_debouncer_without_event_loop_fires_immediately():
    calls = []
    Debouncer(lambda x: calls.append(x))(7)
    assert calls == [7]


def test_loop_survives_a_failing_frame(caplog):
    ticks = []

    def tick(now):
        ticks.append(now)
        if len(ticks) == 3:
            raise RuntimeError("bad frame")

    async def scenario():
        loop = AnimationLoop(tick, interval_ms=1, clock=lambda: 1.0)
        loop.start()
        await asyncio.sleep(0.05)
        alive = loop.running
        loop.stop()
        return alive

    with caplog.at_level("ERROR", logger="sigil.render.loop"):
        alive = asyncio.run(scenario())

    assert alive
    assert len(ticks) > 3
    failures = [r for r in caplog.records if r.name == "sigil.render.loop" and r.levelname == "ERROR"]
    assert len(failures) == 1
    assert failures[0].exc_info[0] is RuntimeError
