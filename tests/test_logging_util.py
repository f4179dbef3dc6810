import json
import logging

import pytest

from musicbingo.api.client import MusicBingoApi
from musicbingo.core.logging_util import setup_logging


def _level(name):
    return logging.getLogger(name).getEffectiveLevel()


def test_verbosity_applies_to_app_logger_only():
    setup_logging()
    assert _level("musicbingo.api.client") == logging.INFO

    setup_logging(verbose=True)
    assert _level("musicbingo.api.client") == logging.DEBUG
    assert _level("aiohttp.client") == logging.WARNING
    assert _level("asyncio") == logging.WARNING

    setup_logging(verbose=True, quiet=True)
    assert _level("musicbingo.api.client") == logging.WARNING


@pytest.mark.asyncio
async def test_verbose_logs_each_request_as_json(backend, capsys):
    backend.reply("track", "abc123", body={"id": "abc123"})
    setup_logging(json_logs=True, verbose=True)

    await MusicBingoApi(backend.base_url).get_track("abc123")

    captured = capsys.readouterr()
    assert captured.out == ""
    lines = [json.loads(line) for line in captured.err.strip().splitlines()]
    messages = [line["message"] for line in lines if line["name"] == "musicbingo.api.client"]
    assert messages[0] == f"musicbingo.api: GET {backend.base_url}/track/abc123"
    assert messages[1] == "musicbingo.api: track abc123 -> 200 OK"
    assert all(line["level"] == "DEBUG" for line in lines)


@pytest.mark.asyncio
async def test_default_level_hides_request_log(backend, capsys):
    backend.reply("track", "abc123", body={"id": "abc123"})
    setup_logging(json_logs=True)

    await MusicBingoApi(backend.base_url).get_track("abc123")

    assert "musicbingo.api" not in capsys.readouterr().err
