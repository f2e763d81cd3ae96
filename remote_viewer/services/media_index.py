from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from remote_viewer.scheduling.base import normalize_content_id
from remote_viewer.services.cached_file import CachedJsonFile

logger = logging.getLogger(__name__)


class MediaEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    rel_path: str = Field(alias="relPath")
    duration_seconds: float | None = Field(default=None, alias="durationSeconds")

    @field_validator("duration_seconds")
    @classmethod
    def _unknown_unless_positive(cls, value: float | None) -> float | None:
        # zero, negative or non-finite means the file was never measured
        if value is None or not math.isfinite(value) or value <= 0:
            return None
        return value


class _MediaIndexFile(BaseModel):
    items: list[Any]


class MediaIndex:
    """Snapshot of the media catalog keyed by normalized relative path."""

    def __init__(self, entries: Iterable[MediaEntry] = ()) -> None:
        self._entries: dict[str, MediaEntry] = {
            normalize_content_id(entry.rel_path): entry for entry in entries
        }

    @classmethod
    def from_durations(cls, durations: Mapping[str, float | None]) -> MediaIndex:
        return cls(
            MediaEntry(rel_path=rel_path, duration_seconds=seconds)
            for rel_path, seconds in durations.items()
        )

    @classmethod
    def from_json(cls, data: Any) -> MediaIndex:
        index_file = _MediaIndexFile.model_validate(data)

        entries: list[MediaEntry] = []
        for position, item in enumerate(index_file.items):
            try:
                entries.append(MediaEntry.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping media index item %d: %s", position, exc)
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, content_id: str) -> MediaEntry | None:
        return self._entries.get(normalize_content_id(content_id))

    def lookup_duration(self, content_id: str) -> float | None:
        entry = self.get(content_id)
        return None if entry is None else entry.duration_seconds


class MediaIndexStore:
    """Loads ``media-index.json``; a broken index reads as empty."""

    def __init__(self, path: Path, ttl_seconds: float = 60.0) -> None:
        self._file: CachedJsonFile[MediaIndex] = CachedJsonFile(
            path=path,
            parse=MediaIndex.from_json,
            empty=MediaIndex,
            ttl_seconds=ttl_seconds,
        )

    def invalidate(self) -> None:
        self._file.invalidate()

    async def snapshot(self) -> MediaIndex:
        try:
            return await self._file.get()
        except ValueError as exc:
            # Durations then fall back to the authored slot windows.
            logger.error("Media index %s is invalid: %s", self._file.path, exc)
            return MediaIndex()

