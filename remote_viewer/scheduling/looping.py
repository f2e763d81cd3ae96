from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from remote_viewer.models.now_playing import Airing
from remote_viewer.models.schedule import PlaylistItem
from remote_viewer.scheduling.base import (
    LoopPosition,
    normalize_content_id,
    title_from_content_id,
)

logger = logging.getLogger(__name__)


def playable_items(playlist: Iterable[PlaylistItem]) -> list[PlaylistItem]:
    items: list[PlaylistItem] = []
    for item in playlist:
        if item.duration_seconds > 0 and math.isfinite(item.duration_seconds):
            items.append(item)
        else:
            logger.warning(
                "Skipping playlist item %r with invalid duration %r",
                item.file,
                item.duration_seconds,
            )
    return items


def loop_length_seconds(playlist: Iterable[PlaylistItem]) -> float:
    return sum(item.duration_seconds for item in playable_items(playlist))


def locate_in_loop(
    playlist: Iterable[PlaylistItem],
    now_seconds: float,
    epoch_offset_hours: float = 0.0,
) -> LoopPosition | None:
    """Map an epoch instant onto the item airing in an endlessly repeating playlist.

    The loop is anchored at the Unix epoch (shifted by ``epoch_offset_hours``),
    so every caller computing this for the same instant gets the same item and
    offset.
    """
    items = playable_items(playlist)
    total = loop_length_seconds(items)
    if not items or total <= 0:
        return None

    position = _position_in_loop(now_seconds, epoch_offset_hours, total)

    accumulated = 0.0
    for index, item in enumerate(items):
        if position < accumulated + item.duration_seconds:
            return LoopPosition(
                item=item,
                index=index,
                offset_seconds=position - accumulated,
                position_in_loop=position,
                loop_seconds=total,
            )
        accumulated += item.duration_seconds

    # float rounding at the very end of the loop
    last = items[-1]
    return LoopPosition(
        item=last,
        index=len(items) - 1,
        offset_seconds=max(0.0, last.duration_seconds - 1),
        position_in_loop=position,
        loop_seconds=total,
    )


def upcoming_airings(
    playlist: Iterable[PlaylistItem],
    now_ms: int,
    epoch_offset_hours: float = 0.0,
) -> list[Airing]:
    """When each item next starts; the airing item reports its current start."""
    items = playable_items(playlist)
    total = loop_length_seconds(items)
    if not items or total <= 0:
        return []

    position = _position_in_loop(now_ms / 1000, epoch_offset_hours, total)

    airings: list[Airing] = []
    accumulated = 0.0
    for item in items:
        item_start = accumulated
        accumulated += item.duration_seconds

        airing_now = item_start <= position < accumulated
        if airing_now:
            seconds_until = item_start - position
        elif item_start > position:
            seconds_until = item_start - position
        else:
            seconds_until = total - position + item_start

        content_id = normalize_content_id(item.file)
        airings.append(
            Airing(
                content_id=content_id,
                title=item.title or title_from_content_id(content_id),
                start_epoch_ms=int(now_ms + seconds_until * 1000),
                seconds_until_start=max(0.0, seconds_until),
                duration_seconds=item.duration_seconds,
                airing_now=airing_now,
            )
        )

    return airings


def _position_in_loop(
    now_seconds: float, epoch_offset_hours: float, total: float
) -> float:
    adjusted = math.floor(now_seconds) - epoch_offset_hours * 3600
    return adjusted % total
