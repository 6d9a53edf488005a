"""Shared types, protocols and errors for the countdown engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol, runtime_checkable

Callback = Callable[[], None]


class Status(Enum):
    """Operating state of a CountdownEngine."""

    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(eq=False, slots=True)
class Subscription:
    """Handle for one periodic wake-up registration.

    Compared by identity. ``next_due_ms`` is only maintained by schedulers
    that pace themselves against a Clock (see ManualScheduler).
    """

    id: int
    interval_ms: int
    callback: Callback
    active: bool = True
    next_due_ms: int | None = None


@runtime_checkable
class Clock(Protocol):
    """Wall-clock time source returning integer milliseconds."""

    def now(self) -> int:
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Periodic wake-up capability the engine acquires but does not own.

    ``unsubscribe`` must be idempotent: releasing an already released
    handle is a no-op.
    """

    def subscribe(self, interval_ms: int, callback: Callback) -> Subscription:
        ...

    def unsubscribe(self, subscription: Subscription) -> None:
        ...


class CountdownError(Exception):
    """Base class for countdown engine errors."""


class InvalidConfigurationError(CountdownError, ValueError):
    """Raised for a bad duration or interval, or configure() while not idle."""


class DisposedEngineError(CountdownError, RuntimeError):
    """Raised when a command is issued to an engine after dispose()."""
