from __future__ import annotations

from remote_viewer.models.now_playing import ChannelInfo
from remote_viewer.models.schedule import ScheduleDocument


def list_channels(
    document: ScheduleDocument | None, include_inactive: bool = False
) -> list[ChannelInfo]:
    if document is None:
        return []

    channels = [
        ChannelInfo(
            id=channel_id,
            short_name=schedule.short_name,
            type=schedule.type,
            active=schedule.active,
        )
        for channel_id, schedule in document.channels.items()
        if include_inactive or schedule.active
    ]

    if channels and all(_is_integer(info.id) for info in channels):
        return sorted(channels, key=lambda info: int(info.id))
    return sorted(channels, key=lambda info: (info.id.casefold(), info.id))


def _is_integer(value: str) -> bool:
    return value.isascii() and value.isdigit()
