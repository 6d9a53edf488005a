"""CountdownEngine - drift-corrected countdown state machine."""
from __future__ import annotations

import logging
import threading
from dataclasses import replace

from countdown.clock import MonotonicClock
from countdown.config import CountdownConfig
from countdown.display import format_clock, split_remaining
from countdown.types import (
    Callback,
    Clock,
    DisposedEngineError,
    InvalidConfigurationError,
    Scheduler,
    Status,
    Subscription,
)

logger = logging.getLogger(__name__)


class CountdownEngine:
    """Counts a duration down to zero from periodic wake-ups.

    Each heartbeat subtracts the wall-clock time measured since the previous
    sample rather than a nominal tick size, so the error never exceeds one
    clock read no matter how late, early or often the scheduler wakes us.

    States are IDLE -> RUNNING -> FINISHED. ``pause()`` returns a running
    countdown to IDLE with its remaining time frozen; ``reset()`` returns any
    state to IDLE with the full duration. At most one wake-up subscription is
    held at a time and it is released synchronously by pause, reset, finish
    and dispose.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: CountdownConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config: CountdownConfig = config if config is not None else CountdownConfig()
        self._scheduler = scheduler
        self._clock: Clock = clock if clock is not None else MonotonicClock()
        self._lock = threading.RLock()

        self._remaining_ms: int = self._config.duration_ms
        self._status: Status = Status.IDLE
        self._last_sample_ms: int | None = None
        self._subscription: Subscription | None = None
        self._disposed: bool = False

        self._finished_handlers: list[Callback] = []

    # --- Snapshot reads ---

    @property
    def config(self) -> CountdownConfig:
        return self._config

    @property
    def total_ms(self) -> int:
        return self._config.duration_ms

    @property
    def interval_ms(self) -> int:
        return self._config.interval_ms

    @property
    def remaining_ms(self) -> int:
        return self._remaining_ms

    @property
    def status(self) -> Status:
        return self._status

    @property
    def last_sample_ms(self) -> int | None:
        return self._last_sample_ms

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def display_minutes(self) -> int:
        return split_remaining(self._remaining_ms)[0]

    @property
    def display_seconds(self) -> int:
        return split_remaining(self._remaining_ms)[1]

    def display(self) -> str:
        """Remaining time as ``MM:SS``."""
        return format_clock(self._remaining_ms)

    # --- Finished notification ---

    def subscribe_finished(self, handler: Callback) -> None:
        """Call ``handler()`` once each time a run reaches zero."""
        self._finished_handlers.append(handler)

    def unsubscribe_finished(self, handler: Callback) -> None:
        try:
            self._finished_handlers.remove(handler)
        except ValueError:
            pass

    # --- Commands ---

    def configure(self, duration_ms: int) -> None:
        """Set a new duration. Only allowed while IDLE."""
        with self._lock:
            self._check_alive("configure")
            if self._status is not Status.IDLE:
                raise InvalidConfigurationError(
                    f"configure() requires an idle engine, status is {self._status.name}"
                )
            self._config = replace(self._config, duration_ms=duration_ms)
            self._remaining_ms = duration_ms
            logger.debug("configured for %d ms", duration_ms)

    def start(self) -> None:
        with self._lock:
            self._check_alive("start")
            if self._status is not Status.IDLE:
                logger.debug("start() ignored while %s", self._status.name)
                return
            if self._remaining_ms == 0:
                self._status = Status.FINISHED
                logger.info("countdown of %d ms finished", self.total_ms)
                finished = True
            else:
                self._acquire()
                self._last_sample_ms = self._clock.now()
                self._status = Status.RUNNING
                logger.debug("started with %d ms remaining", self._remaining_ms)
                finished = False
        if finished:
            self._emit_finished()

    def pause(self) -> None:
        with self._lock:
            self._check_alive("pause")
            if self._status is not Status.RUNNING:
                logger.debug("pause() ignored while %s", self._status.name)
                return
            self._release()
            self._last_sample_ms = None
            self._status = Status.IDLE
            logger.debug("paused with %d ms remaining", self._remaining_ms)

    def reset(self) -> None:
        with self._lock:
            self._check_alive("reset")
            self._release()
            self._remaining_ms = self._config.duration_ms
            self._last_sample_ms = None
            self._status = Status.IDLE
            logger.debug("reset to %d ms", self._remaining_ms)

    def dispose(self) -> None:
        """Release the wake-up subscription. Commands raise afterwards."""
        with self._lock:
            if self._disposed:
                return
            self._release()
            if self._status is Status.RUNNING:
                self._last_sample_ms = None
                self._status = Status.IDLE
            self._disposed = True
            self._finished_handlers.clear()
            logger.debug("disposed with %d ms remaining", self._remaining_ms)

    # --- Wake-up ---

    def on_heartbeat(self) -> None:
        """Account the wall-clock time elapsed since the previous sample."""
        with self._lock:
            if self._status is not Status.RUNNING or self._last_sample_ms is None:
                return
            now = self._clock.now()
            elapsed = now - self._last_sample_ms
            if elapsed < 0:
                # Clamp only; a clock that keeps stepping back still loses time.
                logger.warning(
                    "clock moved backwards by %d ms; counting no elapsed time", -elapsed
                )
                elapsed = 0
            self._last_sample_ms = now
            self._remaining_ms = max(0, self._remaining_ms - elapsed)
            if self._remaining_ms > 0:
                return
            self._release()
            self._last_sample_ms = None
            self._status = Status.FINISHED
            logger.info("countdown of %d ms finished", self.total_ms)
        self._emit_finished()

    # --- Internals ---

    def _check_alive(self, command: str) -> None:
        if self._disposed:
            raise DisposedEngineError(f"{command}() called on a disposed engine")

    def _acquire(self) -> None:
        if self._subscription is None:
            self._subscription = self._scheduler.subscribe(
                self._config.interval_ms, self.on_heartbeat
            )

    def _release(self) -> None:
        if self._subscription is not None:
            subscription = self._subscription
            self._subscription = None
            self._scheduler.unsubscribe(subscription)

    def _emit_finished(self) -> None:
        for handler in list(self._finished_handlers):
            handler()
