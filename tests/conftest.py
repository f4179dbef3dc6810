import asyncio
from urllib.parse import unquote

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from musicbingo.core.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from real settings files and MUSICBINGO_* env vars."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "MUSICBINGO_SETTINGS_PATH",
        "MUSICBINGO_API_BASE_URL",
        "MUSICBINGO_REQUEST_TIMEOUT",
        "MUSICBINGO_LOCALE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


class FakeBackend:
    """Stand-in for the card backend: canned responses keyed by (kind, id)."""

    def __init__(self):
        self.responses = {}
        self.requests = []
        self.server: TestServer | None = None

    def reply(self, kind, ident, *, status=200, body=None, reason=None, text=None, delay=0.0):
        self.responses[(kind, ident)] = (status, body, reason, text, delay)

    @property
    def base_url(self) -> str:
        return str(self.server.make_url("/api/card"))

    async def handle(self, request: web.Request) -> web.Response:
        # raw_path keeps percent-encoding so tests can see what went on the wire
        self.requests.append(request.raw_path)
        parts = request.raw_path.split("?")[0].split("/")
        kind, ident = parts[3], unquote(parts[4]) if len(parts) > 4 else ""
        if (kind, ident) not in self.responses:
            return web.Response(status=404)
        status, body, reason, text, delay = self.responses[(kind, ident)]
        if delay:
            await asyncio.sleep(delay)
        if text is not None:
            return web.Response(status=status, reason=reason, text=text)
        return web.json_response(body, status=status, reason=reason)


@pytest_asyncio.fixture
async def backend():
    fake = FakeBackend()
    app = web.Application()
    app.router.add_get("/api/card/{tail:.*}", fake.handle)
    fake.server = TestServer(app)
    await fake.server.start_server()
    yield fake
    await fake.server.close()
