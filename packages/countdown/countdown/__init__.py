"""countdown - A drift-corrected countdown timer engine."""

from countdown.clock import ManualClock, MonotonicClock
from countdown.config import CountdownConfig
from countdown.display import format_clock, format_segment, split_remaining, timer_title
from countdown.engine import CountdownEngine
from countdown.scheduler import AsyncioScheduler, ManualScheduler, ThreadScheduler
from countdown.types import (
    Clock,
    CountdownError,
    DisposedEngineError,
    InvalidConfigurationError,
    Scheduler,
    Status,
    Subscription,
)

__all__ = [
    "CountdownEngine",
    "CountdownConfig",
    "Status",
    "Clock",
    "Scheduler",
    "Subscription",
    "MonotonicClock",
    "ManualClock",
    "ManualScheduler",
    "ThreadScheduler",
    "AsyncioScheduler",
    "CountdownError",
    "InvalidConfigurationError",
    "DisposedEngineError",
    "format_clock",
    "format_segment",
    "split_remaining",
    "timer_title",
]
