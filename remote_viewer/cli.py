from __future__ import annotations

import argparse
import asyncio
import json
from datetime import datetime, timezone

from remote_viewer.errors import ChannelNotFoundError, ScheduleDocumentError
from remote_viewer.services.channel_clock import ChannelClock, current_time_ms
from remote_viewer.settings import Settings


def _parse_at(value: str) -> int:
    text = value.strip()
    # fromisoformat only learned the "Z" suffix in Python 3.11
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an ISO timestamp: {value!r}") from exc
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)


async def _amain(args: argparse.Namespace) -> int:
    clock = ChannelClock(settings=Settings())

    try:
        if args.command == "channels":
            infos = await clock.channels(include_inactive=args.all)
            payload = [info.model_dump(by_alias=True) for info in infos]
        else:
            now_ms = args.at if args.at is not None else current_time_ms()
            current = await clock.now_playing(args.channel, now_ms=now_ms)
            payload = None if current is None else current.model_dump(by_alias=True)
    except ChannelNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except ScheduleDocumentError as exc:
        raise SystemExit(f"{exc}: {exc.__cause__}") from exc

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="remote-viewer",
        description=(
            "Inspect channel schedules. Paths come from REMOTE_VIEWER_* "
            "environment variables."
        ),
    )
    commands = parser.add_subparsers(dest="command", required=True)

    listing = commands.add_parser("channels", help="List channels")
    listing.add_argument(
        "--all", action="store_true", help="Include inactive channels"
    )

    playing = commands.add_parser("now-playing", help="Resolve what a channel airs")
    playing.add_argument("channel", help="Channel id")
    playing.add_argument(
        "--at",
        type=_parse_at,
        default=None,
        help="ISO timestamp to resolve at (UTC when no offset is given)",
    )

    args = parser.parse_args(argv)
    return asyncio.run(_amain(args))


if __name__ == "__main__":
    raise SystemExit(main())
