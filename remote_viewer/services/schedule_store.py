from __future__ import annotations

import logging
from pathlib import Path

from remote_viewer.errors import ScheduleDocumentError
from remote_viewer.models.schedule import ScheduleDocument, parse_schedule_document
from remote_viewer.services.cached_file import CachedJsonFile

logger = logging.getLogger(__name__)


class ScheduleStore:
    """Read side of ``schedule.json``; hands out immutable snapshots."""

    def __init__(self, path: Path, ttl_seconds: float = 2.0) -> None:
        self._file: CachedJsonFile[ScheduleDocument] = CachedJsonFile(
            path=path,
            parse=parse_schedule_document,
            empty=ScheduleDocument,
            ttl_seconds=ttl_seconds,
        )

    @property
    def path(self) -> Path:
        return self._file.path

    def invalidate(self) -> None:
        self._file.invalidate()

    async def snapshot(self) -> ScheduleDocument:
        try:
            return await self._file.get()
        except ValueError as exc:
            # malformed JSON, undecodable bytes and failed validation all land here
            logger.error("Schedule file %s is invalid: %s", self.path, exc)
            raise ScheduleDocumentError(f"Invalid schedule file {self.path}") from exc
