from __future__ import annotations

import logging
import time as time_module
from typing import Any

from remote_viewer.models.now_playing import (
    Airing,
    ChannelInfo,
    NowPlaying,
    SlotWindow,
)
from remote_viewer.models.schedule import LoopingPlaylistChannel
from remote_viewer.scheduling import (
    get_channel,
    list_channels,
    normalize_channel_id,
    resolve_now_playing,
    resolve_slots,
    upcoming_airings,
)
from remote_viewer.scheduling.timeofday import format_time_of_day
from remote_viewer.services.media_index import MediaIndexStore
from remote_viewer.services.schedule_store import ScheduleStore
from remote_viewer.settings import Settings

logger = logging.getLogger(__name__)


class ChannelClock:
    """Feeds store snapshots and a single reading of the wall clock to the resolver."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self.schedules = ScheduleStore(
            path=settings.schedule_path(),
            ttl_seconds=settings.schedule_cache_ttl_seconds,
        )
        self.media_index = MediaIndexStore(
            path=settings.media_index_path(),
            ttl_seconds=settings.media_index_cache_ttl_seconds,
        )

    async def startup(self) -> None:
        document = await self.schedules.snapshot()
        index = await self.media_index.snapshot()
        logger.info(
            "Loaded %d channel(s) from %s, %d media entries",
            len(document.channels),
            self.schedules.path,
            len(index),
        )

    async def now_playing(
        self, channel: str | None, now_ms: int | None = None
    ) -> NowPlaying | None:
        now_ms = current_time_ms() if now_ms is None else now_ms
        document = await self.schedules.snapshot()
        index = await self.media_index.snapshot()

        current = resolve_now_playing(channel, document, now_ms, index)
        if current is None:
            logger.info(
                "Nothing scheduled on %r at %s",
                normalize_channel_id(channel),
                format_time_of_day(now_ms // 1000),
            )
        else:
            logger.info(
                "Resolved %r: %r offset=%.0fs endsAt=%d",
                current.channel,
                current.content_id,
                current.offset_seconds,
                current.ends_at_epoch_ms,
            )
        return current

    async def channels(self, include_inactive: bool = False) -> list[ChannelInfo]:
        document = await self.schedules.snapshot()
        return list_channels(document, include_inactive=include_inactive)

    async def schedule(self, channel: str) -> dict[str, Any]:
        document = await self.schedules.snapshot()
        return get_channel(document, channel).model_dump(by_alias=True, mode="json")

    async def upcoming(
        self, channel: str, now_ms: int | None = None
    ) -> list[Airing] | list[SlotWindow]:
        now_ms = current_time_ms() if now_ms is None else now_ms
        document = await self.schedules.snapshot()
        schedule = get_channel(document, channel)

        if isinstance(schedule, LoopingPlaylistChannel):
            return upcoming_airings(
                schedule.playlist, now_ms, schedule.epoch_offset_hours
            )

        index = await self.media_index.snapshot()
        return [
            SlotWindow(
                content_id=slot.content_id,
                title=slot.title,
                start=format_time_of_day(slot.start_seconds),
                end=format_time_of_day(slot.end_seconds),
                scheduled_window_seconds=slot.scheduled_window_seconds,
                effective_duration_seconds=slot.effective_duration_seconds,
                crosses_midnight=slot.crosses_midnight,
            )
            for slot in resolve_slots(schedule.slots, index)
        ]


def current_time_ms() -> int:
    return int(time_module.time() * 1000)
