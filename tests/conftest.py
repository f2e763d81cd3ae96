import json
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from remote_viewer.main import create_app
from remote_viewer.settings import Settings

SAMPLE_SCHEDULE = {
    "version": 1,
    "channels": {
        "10": {
            "type": "24hour",
            "shortName": "News",
            "slots": [
                {"start": "08:00", "end": "09:00", "file": "news/morning.mp4"},
                {"start": "23:00", "end": "01:00", "file": "movies/late.mp4", "title": "Late Movie"},
            ],
        },
        "2": {
            "type": "looping",
            "playlist": [
                {"file": "loop/a.mp4", "title": "A", "durationSeconds": 100},
                {"file": "loop/b.mp4", "title": "B", "durationSeconds": 50},
            ],
        },
        "9": {
            "active": False,
            "slots": [],
        },
    },
}

SAMPLE_MEDIA_INDEX = {
    "items": [
        {"relPath": "movies/late.mp4", "durationSeconds": 10800, "format": "mp4", "supported": True},
        {"relPath": "news/morning.mp4", "durationSeconds": 0},
    ]
}


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "schedule.json").write_text(json.dumps(SAMPLE_SCHEDULE), encoding="utf-8")
    (tmp_path / "media-index.json").write_text(json.dumps(SAMPLE_MEDIA_INDEX), encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(data_dir):
    return Settings(
        data_dir=data_dir,
        schedule_cache_ttl_seconds=0,
        media_index_cache_ttl_seconds=0,
    )


@pytest_asyncio.fixture
async def client(settings) -> AsyncIterator[AsyncClient]:
    app = create_app(settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
