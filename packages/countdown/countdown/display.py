"""Text projections of a remaining duration."""
from __future__ import annotations

from countdown.config import MS_PER_MINUTE, MS_PER_SECOND


def format_segment(value: int) -> str:
    """Zero-pad to at least two digits: 7 -> "07", 120 -> "120"."""
    if value < 0:
        raise ValueError(f"segment must be non-negative, got {value}")
    return f"{value:02d}"


def split_remaining(remaining_ms: int) -> tuple[int, int]:
    """Return (minutes, seconds) by truncation, never rounding up."""
    if remaining_ms < 0:
        raise ValueError(f"remaining_ms must be non-negative, got {remaining_ms}")
    minutes = remaining_ms // MS_PER_MINUTE
    seconds = (remaining_ms // MS_PER_SECOND) % 60
    return minutes, seconds


def format_clock(remaining_ms: int) -> str:
    minutes, seconds = split_remaining(remaining_ms)
    return f"{format_segment(minutes)}:{format_segment(seconds)}"


def timer_title(minutes: int) -> str:
    return f"{minutes} minute{'' if minutes == 1 else 's'} timer"
