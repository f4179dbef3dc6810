import json

from typer.testing import CliRunner

import musicbingo.commands.get as get_cmd
from musicbingo.cli import app
from musicbingo.core.errors import FetchError

runner = CliRunner()


class FakeApi:
    calls = []
    result = None
    error = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def get(self, resource_type, identifier):
        FakeApi.calls.append((resource_type.value, identifier))
        if FakeApi.error is not None:
            raise FakeApi.error
        return FakeApi.result


def _install(monkeypatch, result=None, error=None):
    FakeApi.calls = []
    FakeApi.result = result
    FakeApi.error = error
    monkeypatch.setattr(get_cmd, "MusicBingoApi", FakeApi)


def test_get_track_prints_raw_json(monkeypatch):
    _install(monkeypatch, result={"id": "abc123", "name": "Song"})
    res = runner.invoke(app, ["--lang", "en", "get", "track", "abc123", "--raw"])
    assert res.exit_code == 0, res.output
    assert FakeApi.calls == [("track", "abc123")]
    assert json.loads(res.stdout.strip().splitlines()[-1]) == {"id": "abc123", "name": "Song"}


def test_get_artist_pretty(monkeypatch):
    _install(monkeypatch, result=[{"id": "al1"}])
    res = runner.invoke(app, ["get", "artist", "ar1"])
    assert res.exit_code == 0, res.output
    assert FakeApi.calls == [("artist", "ar1")]
    assert "al1" in res.output


def test_get_fetch_error_exits_1(monkeypatch):
    _install(monkeypatch, error=FetchError("album", 404, "Not Found"))
    res = runner.invoke(app, ["--lang", "en", "get", "album", "nope"])
    assert res.exit_code == 1
    assert "Could not fetch album" in res.output
    assert "Not Found" in res.output


def test_get_empty_id_fails_before_network():
    res = runner.invoke(app, ["--lang", "en", "get", "playlist", ""])
    assert res.exit_code == 1
    assert "No playlist id provided" in res.output


def test_version():
    res = runner.invoke(app, ["--version"])
    assert res.exit_code == 0
    assert "MusicBingo v" in res.output


def test_site_json():
    res = runner.invoke(app, ["site", "--json"])
    assert res.exit_code == 0, res.output
    data = json.loads(res.stdout.strip().splitlines()[-1])
    assert data["siteTitle"] == "MusicBingo"


def test_version_works_without_a_command():
    res = runner.invoke(app, ["-v"])
    assert res.exit_code == 0, res.output
    assert res.stdout.strip().startswith("MusicBingo v")


def test_help_lists_command_groups():
    res = runner.invoke(app, ["--help"])
    assert res.exit_code == 0
    for command in ("get", "site", "config"):
        assert command in res.output
    assert "Use `mbingo [COMMAND] --help`" in res.output


def test_bad_configuration_exits_cleanly(monkeypatch):
    monkeypatch.setenv("MUSICBINGO_API_BASE_URL", "ftp://nope")
    res = runner.invoke(app, ["site"])
    assert res.exit_code == 1
    assert "Configuration error" in res.output
    assert res.exception is None or isinstance(res.exception, SystemExit)
