from remote_viewer.scheduling.channels import list_channels
from remote_viewer.scheduling.looping import locate_in_loop, upcoming_airings
from remote_viewer.scheduling.now_playing import (
    get_channel,
    normalize_channel_id,
    resolve_now_playing,
)
from remote_viewer.scheduling.slots import find_active_slot, resolve_slots

__all__ = [
    "find_active_slot",
    "get_channel",
    "list_channels",
    "locate_in_loop",
    "normalize_channel_id",
    "resolve_now_playing",
    "resolve_slots",
    "upcoming_airings",
]
