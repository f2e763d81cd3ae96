from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from remote_viewer.api.routes import router
from remote_viewer.errors import ChannelNotFoundError, ScheduleDocumentError
from remote_viewer.services.channel_clock import ChannelClock
from remote_viewer.settings import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    clock: ChannelClock = fastapi_app.state.clock

    try:
        await clock.startup()
    except ScheduleDocumentError:
        # keep serving; requests report the broken file until it is fixed
        logger.exception("Starting with an unreadable schedule file")
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Remote Viewer", lifespan=lifespan)

    app.state.settings = settings
    app.state.clock = ChannelClock(settings=settings)

    app.include_router(router)

    @app.exception_handler(ChannelNotFoundError)
    async def channel_not_found(
        request: Request, exc: ChannelNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ScheduleDocumentError)
    async def schedule_unreadable(
        request: Request, exc: ScheduleDocumentError
    ) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    return app


application = create_app()
