from __future__ import annotations

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from remote_viewer.scheduling import normalize_channel_id
from remote_viewer.services.channel_clock import ChannelClock, current_time_ms

router = APIRouter()

NO_STORE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
}


def _clock(request: Request) -> ChannelClock:
    return request.app.state.clock


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/now-playing")
async def now_playing(
    request: Request, channel: str | None = Query(default=None)
) -> JSONResponse:
    now_ms = current_time_ms()
    current = await _clock(request).now_playing(channel, now_ms=now_ms)

    if current is None:
        # nothing on air: clients show a blank screen, not an error
        content = {
            "channel": normalize_channel_id(channel),
            "nowPlaying": None,
            "serverTimeMs": now_ms,
        }
        return JSONResponse(content=content, headers=NO_STORE_HEADERS)

    return JSONResponse(
        content=current.model_dump(by_alias=True), headers=NO_STORE_HEADERS
    )


@router.get("/api/channels")
async def channels(
    request: Request,
    include_inactive: bool = Query(default=False, alias="includeInactive"),
) -> JSONResponse:
    infos = await _clock(request).channels(include_inactive=include_inactive)
    return JSONResponse(
        content={"channels": [info.model_dump(by_alias=True) for info in infos]}
    )


@router.get("/api/channels/{channel}/schedule")
async def channel_schedule(request: Request, channel: str) -> JSONResponse:
    schedule = await _clock(request).schedule(channel)
    return JSONResponse(
        content={"channel": normalize_channel_id(channel), "schedule": schedule}
    )


@router.get("/api/channels/{channel}/upcoming")
async def channel_upcoming(request: Request, channel: str) -> JSONResponse:
    entries = await _clock(request).upcoming(channel, now_ms=current_time_ms())
    return JSONResponse(
        content={
            "channel": normalize_channel_id(channel),
            "items": [entry.model_dump(by_alias=True) for entry in entries],
        },
        headers=NO_STORE_HEADERS,
    )
