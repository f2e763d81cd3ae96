from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class NowPlaying(_CamelModel):
    channel: str
    content_id: str
    title: str
    offset_seconds: float
    duration_seconds: float
    effective_duration_seconds: float
    ends_at_epoch_ms: int
    server_time_ms: int
    schedule_type: Literal["daily-slots", "looping-playlist"]


class ChannelInfo(_CamelModel):
    id: str
    short_name: str | None = None
    type: Literal["daily-slots", "looping-playlist"]
    active: bool = True


class Airing(_CamelModel):
    content_id: str
    title: str
    start_epoch_ms: int
    seconds_until_start: float
    duration_seconds: float
    airing_now: bool = False


class SlotWindow(_CamelModel):
    content_id: str
    title: str
    start: str
    end: str
    scheduled_window_seconds: int
    effective_duration_seconds: float
    crosses_midnight: bool
