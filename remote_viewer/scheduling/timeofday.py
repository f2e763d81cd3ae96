from __future__ import annotations

import re

SECONDS_PER_DAY = 86400

_TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?$")


class InvalidTimeFormat(ValueError):
    pass


def parse_time_of_day(text: str | None) -> int:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into seconds since midnight."""
    if not text:
        raise InvalidTimeFormat("empty time of day")

    match = _TIME_PATTERN.match(text.strip())
    if match is None:
        raise InvalidTimeFormat(f"invalid time of day: {text!r}")

    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3) or 0)
    return hours * 3600 + minutes * 60 + seconds


def format_time_of_day(seconds: int) -> str:
    seconds %= SECONDS_PER_DAY
    return f"{seconds // 3600:02d}:{seconds % 3600 // 60:02d}:{seconds % 60:02d}"


def slot_window_seconds(start: int, end: int) -> int:
    """Length of a daily slot; ``end <= start`` means it runs past midnight.

    ``start == end`` is a zero-length slot and must be rejected by the caller
    before asking.
    """
    if end > start:
        return end - start
    return (SECONDS_PER_DAY - start) + end


def crosses_midnight(start: int, end: int) -> bool:
    return end <= start


def second_of_day(now_ms: int | float) -> int:
    # Slot times are authored in UTC; viewers are not localized.
    return int(now_ms // 1000) % SECONDS_PER_DAY
