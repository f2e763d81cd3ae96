import json

import pytest

from remote_viewer import cli
from helpers import at_utc


@pytest.fixture
def cli_env(monkeypatch, data_dir):
    monkeypatch.setenv("REMOTE_VIEWER_DATA_DIR", str(data_dir))
    monkeypatch.delenv("REMOTE_VIEWER_SCHEDULE_FILE", raising=False)
    monkeypatch.delenv("REMOTE_VIEWER_MEDIA_INDEX_FILE", raising=False)
    return data_dir


def test_channels_lists_active_channels(cli_env, capsys):
    assert cli.main(["channels"]) == 0

    channels = json.loads(capsys.readouterr().out)
    assert [channel["id"] for channel in channels] == ["2", "10"]
    assert channels[1]["shortName"] == "News"


def test_channels_all_includes_inactive(cli_env, capsys):
    cli.main(["channels", "--all"])

    assert [channel["id"] for channel in json.loads(capsys.readouterr().out)] == ["2", "9", "10"]


@pytest.mark.parametrize(
    "at",
    ["2024-03-01T08:15:00Z", "2024-03-01T08:15:00+00:00", "2024-03-01T08:15:00", "2024-03-01T10:15:00+02:00"],
)
def test_now_playing_at_timestamp(cli_env, capsys, at):
    assert cli.main(["now-playing", "10", "--at", at]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["contentId"] == "news/morning.mp4"
    assert data["offsetSeconds"] == 900
    assert data["serverTimeMs"] == at_utc(8, 15)


def test_now_playing_nothing_scheduled_prints_null(cli_env, capsys):
    cli.main(["now-playing", "10", "--at", "2024-03-01T12:00:00Z"])

    assert json.loads(capsys.readouterr().out) is None


def test_now_playing_unknown_channel_exits(cli_env):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["now-playing", "404", "--at", "2024-03-01T08:15:00Z"])

    assert "404" in str(excinfo.value.code)


def test_broken_schedule_exits(cli_env):
    (cli_env / "schedule.json").write_text("{broken", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["channels"])

    assert "Invalid schedule file" in str(excinfo.value.code)


def test_bad_timestamp_is_a_usage_error(cli_env, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["now-playing", "10", "--at", "yesterday"])

    assert excinfo.value.code == 2
    assert "not an ISO timestamp" in capsys.readouterr().err
