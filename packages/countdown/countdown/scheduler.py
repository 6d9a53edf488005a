"""Wake-up schedulers: manual (test/host-loop), threaded, and asyncio."""
from __future__ import annotations

import asyncio
import itertools
import logging
import threading
import time

from countdown.clock import ManualClock
from countdown.types import Callback, Clock, Subscription

logger = logging.getLogger(__name__)


def _check_interval(interval_ms: int) -> None:
    if interval_ms <= 0:
        raise ValueError("interval_ms must be positive")


class ManualScheduler:
    """Deterministic scheduler driven by its caller.

    Host loops that already own their frame pacing call ``pump()`` once per
    frame; tests use ``fire()`` to force a wake-up or ``advance()`` to move a
    ManualClock forward while firing every due callback on the way.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else ManualClock()
        self._subscriptions: dict[int, Subscription] = {}
        self._ids = itertools.count(1)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def active_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, interval_ms: int, callback: Callback) -> Subscription:
        _check_interval(interval_ms)
        sub = Subscription(
            id=next(self._ids),
            interval_ms=interval_ms,
            callback=callback,
            next_due_ms=self._clock.now() + interval_ms,
        )
        self._subscriptions[sub.id] = sub
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.active = False
        self._subscriptions.pop(subscription.id, None)

    def fire(self) -> int:
        """Run every active callback once, ignoring due times."""
        fired = 0
        for sub in list(self._subscriptions.values()):
            if not sub.active:
                continue
            sub.next_due_ms = self._clock.now() + sub.interval_ms
            sub.callback()
            fired += 1
        return fired

    def pump(self) -> int:
        """Run callbacks whose due time has passed. Returns how many ran."""
        fired = 0
        for sub in list(self._subscriptions.values()):
            if not sub.active:
                continue
            now = self._clock.now()
            if sub.next_due_ms is not None and now < sub.next_due_ms:
                continue
            # Missed periods collapse into one wake-up, like a timer that
            # was starved rather than a backlog of catch-up calls.
            sub.next_due_ms = now + sub.interval_ms
            sub.callback()
            fired += 1
        return fired

    def advance(self, ms: int) -> int:
        """Step the ManualClock forward ``ms``, pumping at each due time."""
        if not isinstance(self._clock, ManualClock):
            raise TypeError("advance() requires a ManualClock")
        if ms < 0:
            raise ValueError("cannot advance by a negative amount")

        clock = self._clock
        end = clock.now() + ms
        fired = self.pump()
        while True:
            now = clock.now()
            due = [
                s.next_due_ms for s in self._subscriptions.values()
                if s.next_due_ms is not None
            ]
            target = min([end, *due])
            if target > now:
                clock.advance(target - now)
            fired += self.pump()
            if target >= end:
                break
        return fired


class ThreadScheduler:
    """Runs each subscription on its own daemon thread.

    Callbacks run off the caller's thread, so the receiver must serialize
    its own state (CountdownEngine holds a lock around every transition).

    ``unsubscribe`` signals the worker but does not join it, so a callback
    that is already in flight (for example blocked on the receiver's lock)
    may still run once after the handle is released. Receivers must treat
    such a late call as a no-op; CountdownEngine ignores heartbeats unless
    it is RUNNING and measures elapsed time from its own latest sample.
    """

    def __init__(self, name: str = "countdown-heartbeat") -> None:
        self._name = name
        self._lock = threading.Lock()
        self._workers: dict[int, tuple[threading.Thread, threading.Event]] = {}
        self._ids = itertools.count(1)

    @property
    def active_count(self) -> int:
        with self._lock:
            return len(self._workers)

    def subscribe(self, interval_ms: int, callback: Callback) -> Subscription:
        _check_interval(interval_ms)
        sub = Subscription(id=next(self._ids), interval_ms=interval_ms, callback=callback)
        stop = threading.Event()
        thread = threading.Thread(
            target=self._run,
            args=(sub, stop),
            name=f"{self._name}-{sub.id}",
            daemon=True,
        )
        with self._lock:
            self._workers[sub.id] = (thread, stop)
        thread.start()
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.active = False
        with self._lock:
            worker = self._workers.pop(subscription.id, None)
        if worker is not None:
            # Not joined: the worker may be blocked on the engine lock held
            # by the caller of this method.
            worker[1].set()

    def shutdown(self, wait: bool = True, timeout: float | None = None) -> None:
        """Stop every worker. Joins them unless called from a worker."""
        with self._lock:
            workers = list(self._workers.values())
            self._workers.clear()
        for _, stop in workers:
            stop.set()
        if not wait:
            return
        current = threading.current_thread()
        for thread, _ in workers:
            if thread is not current:
                thread.join(timeout)

    def _run(self, sub: Subscription, stop: threading.Event) -> None:
        interval = sub.interval_ms / 1000.0
        wait = interval
        while not stop.wait(wait):
            if not sub.active:
                break
            start = time.monotonic()
            try:
                sub.callback()
            except Exception:
                logger.exception("wake-up callback %d failed", sub.id)
            elapsed = time.monotonic() - start
            wait = max(0.0, interval - elapsed)


class AsyncioScheduler:
    """Chains ``loop.call_later`` handles on an asyncio event loop.

    With no explicit loop, ``subscribe`` must be called from a coroutine
    or callback running on the target loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._handles: dict[int, asyncio.TimerHandle] = {}
        self._ids = itertools.count(1)

    @property
    def active_count(self) -> int:
        return len(self._handles)

    def subscribe(self, interval_ms: int, callback: Callback) -> Subscription:
        _check_interval(interval_ms)
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        sub = Subscription(id=next(self._ids), interval_ms=interval_ms, callback=callback)
        self._schedule(loop, sub)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.active = False
        handle = self._handles.pop(subscription.id, None)
        if handle is not None:
            handle.cancel()

    def _schedule(self, loop: asyncio.AbstractEventLoop, sub: Subscription) -> None:
        self._handles[sub.id] = loop.call_later(
            sub.interval_ms / 1000.0, self._fire, loop, sub
        )

    def _fire(self, loop: asyncio.AbstractEventLoop, sub: Subscription) -> None:
        if not sub.active:
            return
        try:
            sub.callback()
        except Exception:
            logger.exception("wake-up callback %d failed", sub.id)
        if sub.active:
            self._schedule(loop, sub)
