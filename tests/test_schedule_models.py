import pytest
from pydantic import ValidationError

from remote_viewer.models.schedule import (
    DailySlotsChannel,
    LoopingPlaylistChannel,
    parse_schedule_document,
)


def parse_channel(data):
    return parse_schedule_document({"channels": {"x": data}}).channels["x"]


def test_missing_type_means_daily_slots():
    channel = parse_channel({"slots": [{"start": "08:00", "end": "09:00", "file": "a.mp4"}]})

    assert isinstance(channel, DailySlotsChannel)
    assert channel.type == "daily-slots"
    assert channel.active is True


@pytest.mark.parametrize(("legacy", "expected"), [("24hour", DailySlotsChannel), ("looping", LoopingPlaylistChannel)])
def test_legacy_type_names(legacy, expected):
    data = {"type": legacy, "slots": [], "playlist": []}

    assert isinstance(parse_channel(data), expected)


def test_looping_channel_fields():
    channel = parse_channel(
        {
            "type": "looping-playlist",
            "shortName": "Loop",
            "epochOffsetHours": 1.5,
            "playlist": [{"file": "a.mp4", "durationSeconds": 120}],
        }
    )

    assert isinstance(channel, LoopingPlaylistChannel)
    assert channel.short_name == "Loop"
    assert channel.epoch_offset_hours == 1.5
    assert channel.playlist[0].duration_seconds == 120


def test_daily_channel_without_slots_is_rejected():
    with pytest.raises(ValidationError):
        parse_channel({"type": "daily-slots", "playlist": []})


def test_looping_channel_without_playlist_is_rejected():
    with pytest.raises(ValidationError):
        parse_channel({"type": "looping", "slots": []})


def test_unknown_type_is_rejected():
    with pytest.raises(ValidationError):
        parse_channel({"type": "weekly", "slots": []})


@pytest.mark.parametrize("kind", [["24hour"], 7])
def test_non_string_type_is_a_validation_error(kind):
    with pytest.raises(ValidationError):
        parse_channel({"type": kind, "slots": []})


def test_bad_slot_times_do_not_reject_the_document():
    document = parse_schedule_document(
        {"channels": {"1": {"slots": [{"start": "nope", "end": "09:00", "file": "a.mp4"}]}}}
    )

    assert document.channels["1"].slots[0].start == "nope"


def test_document_dump_uses_camel_case_aliases():
    document = parse_schedule_document(
        {"channels": {"1": {"type": "looping", "shortName": "One", "playlist": []}}}
    )

    dumped = document.channels["1"].model_dump(by_alias=True)

    assert dumped["shortName"] == "One"
    assert dumped["epochOffsetHours"] == 0
    assert dumped["type"] == "looping-playlist"
