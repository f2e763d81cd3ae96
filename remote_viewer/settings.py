from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REMOTE_VIEWER_",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    data_dir: Path = Path("./data/local")

    # Explicit paths win over <data_dir>/<name>.json
    schedule_file: Path | None = None
    media_index_file: Path | None = None

    schedule_cache_ttl_seconds: float = 2.0
    media_index_cache_ttl_seconds: float = 60.0

    log_level: str = "INFO"

    def schedule_path(self) -> Path:
        return self.schedule_file or self.data_dir / "schedule.json"

    def media_index_path(self) -> Path:
        return self.media_index_file or self.data_dir / "media-index.json"
