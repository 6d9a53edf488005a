"""Integration tests: engine driven by real-time thread and asyncio schedulers."""
from __future__ import annotations

import asyncio
import threading
import time

from countdown import (
    AsyncioScheduler,
    CountdownConfig,
    CountdownEngine,
    MonotonicClock,
    Status,
    ThreadScheduler,
)


class TestThreadedEngine:
    def test_runs_to_completion(self) -> None:
        scheduler = ThreadScheduler()
        engine = CountdownEngine(
            scheduler, CountdownConfig(duration_ms=60, interval_ms=5), MonotonicClock()
        )
        done = threading.Event()
        calls: list[float] = []

        def on_finished() -> None:
            calls.append(time.monotonic())
            done.set()

        engine.subscribe_finished(on_finished)
        started = time.monotonic()
        engine.start()
        try:
            assert done.wait(2.0)
        finally:
            scheduler.shutdown(timeout=1.0)

        assert engine.status is Status.FINISHED
        assert engine.remaining_ms == 0
        assert len(calls) == 1
        # Cannot finish before the wall clock says so.
        assert calls[0] - started >= 0.055
        assert scheduler.active_count == 0

    def test_pause_from_main_thread_stops_countdown(self) -> None:
        scheduler = ThreadScheduler()
        engine = CountdownEngine(
            scheduler, CountdownConfig(duration_ms=10_000, interval_ms=5)
        )
        engine.start()
        time.sleep(0.05)
        engine.pause()
        frozen = engine.remaining_ms
        time.sleep(0.05)
        try:
            assert engine.status is Status.IDLE
            assert engine.remaining_ms == frozen
            assert frozen < 10_000
            assert scheduler.active_count == 0
        finally:
            scheduler.shutdown(timeout=1.0)

    def test_reset_races_with_heartbeats(self) -> None:
        scheduler = ThreadScheduler()
        engine = CountdownEngine(
            scheduler, CountdownConfig(duration_ms=10_000, interval_ms=1)
        )
        finished: list[bool] = []
        engine.subscribe_finished(lambda: finished.append(True))
        try:
            for _ in range(50):
                engine.start()
                time.sleep(0.002)
                engine.reset()
                assert engine.remaining_ms == 10_000
                assert engine.status is Status.IDLE
                assert scheduler.active_count == 0
        finally:
            scheduler.shutdown(timeout=1.0)
        assert finished == []


class TestAsyncioEngine:
    def test_runs_to_completion(self) -> None:
        async def scenario() -> tuple[CountdownEngine, list[bool]]:
            engine = CountdownEngine(
                AsyncioScheduler(), CountdownConfig(duration_ms=40, interval_ms=5)
            )
            done = asyncio.Event()
            calls: list[bool] = []

            def on_finished() -> None:
                calls.append(True)
                done.set()

            engine.subscribe_finished(on_finished)
            engine.start()
            await asyncio.wait_for(done.wait(), timeout=2.0)
            await asyncio.sleep(0.03)
            return engine, calls

        engine, calls = asyncio.run(scenario())
        assert engine.status is Status.FINISHED
        assert calls == [True]

    def test_dispose_cancels_pending_wake_up(self) -> None:
        async def scenario() -> tuple[int, int]:
            scheduler = AsyncioScheduler()
            engine = CountdownEngine(
                scheduler, CountdownConfig(duration_ms=10_000, interval_ms=5)
            )
            engine.start()
            await asyncio.sleep(0.03)
            engine.dispose()
            frozen = engine.remaining_ms
            await asyncio.sleep(0.03)
            assert scheduler.active_count == 0
            return frozen, engine.remaining_ms

        frozen, later = asyncio.run(scenario())
        assert frozen == later < 10_000
