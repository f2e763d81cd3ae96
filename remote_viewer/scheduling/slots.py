from __future__ import annotations

import logging
from collections.abc import Iterable

from remote_viewer.models.schedule import ScheduleSlot
from remote_viewer.scheduling.base import (
    ActiveSlot,
    DurationLookup,
    ResolvedSlot,
    normalize_content_id,
    title_from_content_id,
)
from remote_viewer.scheduling.timeofday import (
    SECONDS_PER_DAY,
    InvalidTimeFormat,
    crosses_midnight,
    parse_time_of_day,
    slot_window_seconds,
)

logger = logging.getLogger(__name__)


def resolve_slots(
    slots: Iterable[ScheduleSlot], durations: DurationLookup
) -> list[ResolvedSlot]:
    """Turn authored daily slots into windows ordered by start time.

    Bad slots are logged and skipped. Each window is capped by both the
    authored slot length and the real media length; when the media length is
    unknown the authored length is used as is.
    """
    parsed: list[tuple[int, int, ScheduleSlot]] = []
    for slot in slots:
        try:
            start = parse_time_of_day(slot.start)
            end = parse_time_of_day(slot.end)
        except InvalidTimeFormat as exc:
            logger.warning("Skipping slot for %r: %s", slot.file, exc)
            continue

        if start == end:
            logger.warning(
                "Skipping zero-length slot for %r (%s -> %s)",
                slot.file,
                slot.start,
                slot.end,
            )
            continue

        parsed.append((start, end, slot))

    # sorted() is stable, so equal start times keep authoring order
    parsed = sorted(parsed, key=lambda entry: entry[0])

    resolved: list[ResolvedSlot] = []
    for start, end, slot in parsed:
        content_id = normalize_content_id(slot.file)
        window = slot_window_seconds(start, end)

        duration = _known_duration(durations, content_id)
        if duration is None:
            logger.debug(
                "No duration known for %r, using the %ss slot window",
                content_id,
                window,
            )
            duration = float(window)

        resolved.append(
            ResolvedSlot(
                content_id=content_id,
                title=slot.title or title_from_content_id(content_id),
                start_seconds=start,
                end_seconds=end,
                scheduled_window_seconds=window,
                duration_seconds=duration,
                effective_duration_seconds=max(1.0, min(duration, float(window))),
                crosses_midnight=crosses_midnight(start, end),
            )
        )

    return resolved


def find_active_slot(
    slots: Iterable[ResolvedSlot], seconds_of_day: int
) -> ActiveSlot | None:
    """Return the first slot airing at ``seconds_of_day``, with its offset.

    Slots are expected in start order; overlapping slots are not reconciled,
    the earliest listed one wins. A gap between slots yields ``None``.
    """
    for slot in slots:
        offset = _offset_into(slot, seconds_of_day)
        if offset is None:
            continue

        upper = max(0.0, slot.effective_duration_seconds - 1)
        return ActiveSlot(slot=slot, offset_seconds=min(max(offset, 0), upper))

    return None


def _offset_into(slot: ResolvedSlot, seconds_of_day: int) -> float | None:
    start = slot.start_seconds
    window_end = start + slot.effective_duration_seconds

    if slot.crosses_midnight and window_end >= SECONDS_PER_DAY:
        if seconds_of_day >= start:
            return seconds_of_day - start
        if seconds_of_day < window_end - SECONDS_PER_DAY:
            return (SECONDS_PER_DAY - start) + seconds_of_day
        return None

    # Also covers a midnight-crossing slot whose media runs out before 00:00.
    if start <= seconds_of_day < window_end:
        return seconds_of_day - start
    return None


def _known_duration(durations: DurationLookup, content_id: str) -> float | None:
    value = durations.lookup_duration(content_id)
    if value is None or value <= 0:
        return None
    return float(value)
