from __future__ import annotations

import re

from remote_viewer.errors import ChannelNotFoundError
from remote_viewer.models.now_playing import NowPlaying
from remote_viewer.models.schedule import (
    DailySlotsChannel,
    LoopingPlaylistChannel,
    ScheduleDocument,
)
from remote_viewer.scheduling.base import (
    DurationLookup,
    normalize_content_id,
    title_from_content_id,
)
from remote_viewer.scheduling.looping import locate_in_loop
from remote_viewer.scheduling.slots import find_active_slot, resolve_slots
from remote_viewer.scheduling.timeofday import second_of_day


def normalize_channel_id(channel: str | None) -> str:
    if not channel:
        return ""
    return re.sub(r"[^a-zA-Z0-9_-]", "-", channel.strip())


def get_channel(
    document: ScheduleDocument | None, channel: str | None
) -> DailySlotsChannel | LoopingPlaylistChannel:
    channel_id = normalize_channel_id(channel)
    if document is None or channel_id not in document.channels:
        raise ChannelNotFoundError(channel_id)
    return document.channels[channel_id]


def resolve_now_playing(
    channel: str | None,
    document: ScheduleDocument | None,
    now_ms: int,
    durations: DurationLookup,
) -> NowPlaying | None:
    """Answer what ``channel`` is airing at ``now_ms``.

    Returns ``None`` when the channel exists but nothing is scheduled right
    now. Raises :class:`ChannelNotFoundError` when the channel (or the whole
    document) is missing. Inactive channels can still be queried.
    """
    channel_id = normalize_channel_id(channel)
    schedule = get_channel(document, channel_id)

    if isinstance(schedule, LoopingPlaylistChannel):
        return _resolve_looping(channel_id, schedule, now_ms)
    return _resolve_daily(channel_id, schedule, now_ms, durations)


def build_now_playing(
    *,
    channel: str,
    content_id: str,
    title: str,
    offset_seconds: float,
    effective_duration_seconds: float,
    duration_seconds: float,
    now_ms: int,
    schedule_type: str,
) -> NowPlaying:
    remaining = effective_duration_seconds - offset_seconds
    return NowPlaying(
        channel=channel,
        content_id=content_id,
        title=title,
        offset_seconds=offset_seconds,
        duration_seconds=duration_seconds,
        effective_duration_seconds=effective_duration_seconds,
        ends_at_epoch_ms=int(now_ms + remaining * 1000),
        server_time_ms=int(now_ms),
        schedule_type=schedule_type,
    )


def _resolve_daily(
    channel_id: str,
    schedule: DailySlotsChannel,
    now_ms: int,
    durations: DurationLookup,
) -> NowPlaying | None:
    slots = resolve_slots(schedule.slots, durations)
    if not slots:
        return None

    active = find_active_slot(slots, second_of_day(now_ms))
    if active is None:
        return None

    return build_now_playing(
        channel=channel_id,
        content_id=active.slot.content_id,
        title=active.slot.title,
        offset_seconds=active.offset_seconds,
        effective_duration_seconds=active.slot.effective_duration_seconds,
        duration_seconds=active.slot.duration_seconds,
        now_ms=now_ms,
        schedule_type=schedule.type,
    )


def _resolve_looping(
    channel_id: str, schedule: LoopingPlaylistChannel, now_ms: int
) -> NowPlaying | None:
    position = locate_in_loop(
        schedule.playlist, now_ms / 1000, schedule.epoch_offset_hours
    )
    if position is None:
        return None

    content_id = normalize_content_id(position.item.file)
    return build_now_playing(
        channel=channel_id,
        content_id=content_id,
        title=position.item.title or title_from_content_id(content_id),
        offset_seconds=position.offset_seconds,
        effective_duration_seconds=position.item.duration_seconds,
        duration_seconds=position.item.duration_seconds,
        now_ms=now_ms,
        schedule_type=schedule.type,
    )
