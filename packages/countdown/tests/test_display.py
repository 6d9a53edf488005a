"""Tests for the MM:SS projection helpers."""

import pytest
from countdown.display import format_clock, format_segment, split_remaining, timer_title


@pytest.mark.parametrize(
    "value, expected",
    [(0, "00"), (7, "07"), (9, "09"), (10, "10"), (59, "59"), (120, "120")],
)
def test_format_segment(value, expected):
    assert format_segment(value) == expected


def test_format_segment_rejects_negative():
    with pytest.raises(ValueError):
        format_segment(-1)


def test_split_truncates():
    # 4:59.999 must still read 04:59, never round up to 05:00
    assert split_remaining(299_999) == (4, 59)
    assert split_remaining(300_000) == (5, 0)
    assert split_remaining(999) == (0, 0)
    assert split_remaining(1000) == (0, 1)


def test_split_rejects_negative():
    with pytest.raises(ValueError):
        split_remaining(-1)


def test_format_clock():
    assert format_clock(0) == "00:00"
    assert format_clock(300_000) == "05:00"
    assert format_clock(61_500) == "01:01"
    assert format_clock(100 * 60_000 + 5_000) == "100:05"


def test_seconds_cover_full_range():
    seen = {format_clock(s * 1000)[-2:] for s in range(60)}
    assert seen == {f"{s:02d}" for s in range(60)}


def test_timer_title_pluralizes():
    assert timer_title(1) == "1 minute timer"
    assert timer_title(5) == "5 minutes timer"
    assert timer_title(0) == "0 minutes timer"
