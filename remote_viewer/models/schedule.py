from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DAILY_SLOTS = "daily-slots"
LOOPING_PLAYLIST = "looping-playlist"

# Values written by older schedule files.
_TYPE_ALIASES = {
    "24hour": DAILY_SLOTS,
    "looping": LOOPING_PLAYLIST,
}


class ScheduleSlot(BaseModel):
    # Raw authored times; a bad value drops this slot, not the whole channel.
    start: str
    end: str
    file: str
    title: str | None = None


class PlaylistItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file: str
    title: str | None = None
    duration_seconds: float = Field(alias="durationSeconds")


class _ChannelBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    active: bool = True
    short_name: str | None = Field(default=None, alias="shortName")


class DailySlotsChannel(_ChannelBase):
    type: Literal["daily-slots"] = DAILY_SLOTS
    slots: list[ScheduleSlot]


class LoopingPlaylistChannel(_ChannelBase):
    type: Literal["looping-playlist"] = LOOPING_PLAYLIST
    playlist: list[PlaylistItem]
    epoch_offset_hours: float = Field(default=0.0, alias="epochOffsetHours")


ChannelSchedule = Annotated[
    Union[DailySlotsChannel, LoopingPlaylistChannel],
    Field(discriminator="type"),
]


class ScheduleDocument(BaseModel):
    channels: dict[str, ChannelSchedule] = Field(default_factory=dict)
    version: int | None = None

    @field_validator("channels", mode="before")
    @classmethod
    def _normalize_channel_types(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {key: normalize_channel_type(raw) for key, raw in value.items()}


def normalize_channel_type(raw: Any) -> Any:
    """Fill in a missing ``type`` and map legacy names onto the current ones."""
    if not isinstance(raw, dict):
        return raw
    kind = raw.get("type") or DAILY_SLOTS
    if isinstance(kind, str):
        kind = _TYPE_ALIASES.get(kind, kind)
    return {**raw, "type": kind}


def parse_schedule_document(data: Any) -> ScheduleDocument:
    return ScheduleDocument.model_validate(data)
