"""Countdown configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from countdown.types import InvalidConfigurationError

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND

DEFAULT_MINUTES = 5
DEFAULT_INTERVAL_MS = 100


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class CountdownConfig:
    """Immutable configuration for a CountdownEngine.

    Attributes:
        duration_ms: Countdown length in milliseconds (>= 0).
        interval_ms: Requested wake-up period. Only affects how promptly
            the remaining time is refreshed, never its accuracy.
    """

    duration_ms: int = DEFAULT_MINUTES * MS_PER_MINUTE
    interval_ms: int = DEFAULT_INTERVAL_MS

    def __post_init__(self) -> None:
        if not _is_int(self.duration_ms) or self.duration_ms < 0:
            raise InvalidConfigurationError(
                f"duration_ms must be a non-negative integer, got {self.duration_ms!r}"
            )
        if not _is_int(self.interval_ms) or self.interval_ms <= 0:
            raise InvalidConfigurationError(
                f"interval_ms must be a positive integer, got {self.interval_ms!r}"
            )

    @classmethod
    def from_minutes(
        cls, minutes: int, interval_ms: int = DEFAULT_INTERVAL_MS
    ) -> CountdownConfig:
        """Build a config for a whole-minute countdown."""
        if not _is_int(minutes) or minutes < 0:
            raise InvalidConfigurationError(
                f"minutes must be a non-negative integer, got {minutes!r}"
            )
        return cls(duration_ms=minutes * MS_PER_MINUTE, interval_ms=interval_ms)
