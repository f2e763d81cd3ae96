from __future__ import annotations

import asyncio
import json
import time as time_module
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, TypeVar

import aiofiles

T = TypeVar("T")


class CachedJsonFile(Generic[T]):
    """A JSON file parsed into ``T``, re-read only when its mtime changes.

    The file is re-stat'ed at most once per ``ttl_seconds``. A missing file
    parses as ``empty()``. Parse errors propagate to the caller.
    """

    def __init__(
        self,
        path: Path,
        parse: Callable[[Any], T],
        empty: Callable[[], T],
        ttl_seconds: float,
    ) -> None:
        self._path = path
        self._parse = parse
        self._empty = empty
        self._ttl = ttl_seconds
        self._lock = asyncio.Lock()

        self._value: T | None = None
        self._mtime: float | None = None
        self._checked_ts: float = 0.0

    @property
    def path(self) -> Path:
        return self._path

    def invalidate(self) -> None:
        self._value = None
        self._mtime = None
        self._checked_ts = 0.0

    async def get(self) -> T:
        async with self._lock:
            now = time_module.monotonic()
            if self._value is not None and now - self._checked_ts < self._ttl:
                return self._value

            try:
                mtime = self._path.stat().st_mtime
            except FileNotFoundError:
                self._value = self._empty()
                self._mtime = None
                self._checked_ts = now
                return self._value

            if self._value is not None and mtime == self._mtime:
                self._checked_ts = now
                return self._value

            try:
                async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
                    raw = await f.read()
                value = self._parse(json.loads(raw))
            except Exception:
                self.invalidate()
                raise

            self._value = value
            self._mtime = mtime
            self._checked_ts = now
            return value
