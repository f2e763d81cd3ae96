from datetime import datetime, timezone


def at_utc(hour: int, minute: int, second: int = 0, day: int = 1) -> int:
    """Epoch milliseconds for a wall-clock time on a fixed UTC date."""
    moment = datetime(2024, 3, day, hour, minute, second, tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)
