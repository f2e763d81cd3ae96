from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from typing import Protocol

from remote_viewer.models.schedule import PlaylistItem


class DurationLookup(Protocol):
    def lookup_duration(self, content_id: str) -> float | None:
        ...


@dataclass(frozen=True)
class ResolvedSlot:
    content_id: str
    title: str
    start_seconds: int
    end_seconds: int
    scheduled_window_seconds: int
    duration_seconds: float
    effective_duration_seconds: float
    crosses_midnight: bool


@dataclass(frozen=True)
class ActiveSlot:
    slot: ResolvedSlot
    offset_seconds: float


@dataclass(frozen=True)
class LoopPosition:
    item: PlaylistItem
    index: int
    offset_seconds: float
    position_in_loop: float
    loop_seconds: float


def normalize_content_id(rel_path: str) -> str:
    normalized = posixpath.normpath(rel_path.replace("\\", "/"))
    # never let a schedule entry point above the media root
    normalized = re.sub(r"^(\.\.(/|$))+", "", normalized)
    return normalized.lstrip("/") if normalized != "." else ""


def title_from_content_id(content_id: str) -> str:
    stem, _ext = posixpath.splitext(posixpath.basename(content_id))
    return stem or content_id
