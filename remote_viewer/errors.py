from __future__ import annotations


class ChannelNotFoundError(LookupError):
    def __init__(self, channel: str) -> None:
        super().__init__(f"Schedule not found for channel {channel!r}")
        self.channel = channel


class ScheduleDocumentError(RuntimeError):
    """The schedule file exists but could not be parsed or validated."""
