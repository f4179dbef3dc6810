"""
Async client for the MusicBingo card backend.

Each read operation validates one identifier, issues a single GET against
`{base_url}/{resource_type}/{id}` and returns the parsed JSON as sent by the
server. There is no caching and no retry: a failed call fails as a whole.

The client can be used standalone, in which case every call opens a
short-lived `aiohttp.ClientSession`, or as an async context manager that owns
one session for the duration of the block.
"""

import logging
from typing import Any, Dict, List, Optional

import aiohttp
from yarl import URL

from ..core.config import get_settings
from ..core.errors import FetchError, ParseError
from .request import ResourceRequest, ResourceType

logger = logging.getLogger(__name__)


class MusicBingoApi:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url
        self._timeout = timeout
        self.session = session
        self._owns_session = False

    @property
    def base_url(self) -> str:
        # Resolved lazily so importing the module never loads settings
        return (self._base_url or get_settings().api_base_url).rstrip("/")

    def _client_timeout(self) -> aiohttp.ClientTimeout:
        total = self._timeout
        if total is None:
            total = get_settings().request_timeout
        return aiohttp.ClientTimeout(total=total)

    async def __aenter__(self):
        if self.session is None:
            self.session = aiohttp.ClientSession(timeout=self._client_timeout())
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None
            self._owns_session = False

    async def _request(self, resource_type: ResourceType, identifier: str) -> Any:
        # Raises InvalidInputError before any network I/O
        request = ResourceRequest(resource_type, identifier)
        url = request.url(self.base_url)
        if self.session is not None:
            return await self._get(self.session, request, url)
        async with aiohttp.ClientSession(timeout=self._client_timeout()) as session:
            return await self._get(session, request, url)

    async def _get(
        self, session: aiohttp.ClientSession, request: ResourceRequest, url: str
    ) -> Any:
        kind = request.resource_type.value
        logger.debug("musicbingo.api: GET %s", url)
        async with session.get(URL(url, encoded=True)) as response:
            logger.debug(
                "musicbingo.api: %s %s -> %s %s", kind, request.identifier, response.status, response.reason
            )
            if not 200 <= response.status < 300:
                raise FetchError(kind, response.status, response.reason or str(response.status))
            try:
                payload = await response.json(content_type=None)
            except ValueError as e:
                raise ParseError(kind, f"invalid JSON body ({e})") from e
        return payload

    async def get_playlist(self, playlist_id: str) -> Dict[str, Any]:
        return await self._request(ResourceType.PLAYLIST, playlist_id)

    async def get_artist(self, artist_id: str) -> List[Dict[str, Any]]:
        """Return the simplified albums of an artist."""
        return await self._request(ResourceType.ARTIST, artist_id)

    async def get_album(self, album_id: str) -> Dict[str, Any]:
        return await self._request(ResourceType.ALBUM, album_id)

    async def get_track(self, track_id: str) -> Dict[str, Any]:
        return await self._request(ResourceType.TRACK, track_id)

    async def get(self, resource_type: ResourceType | str, identifier: Optional[str]) -> Any:
        """Fetch any resource type by name, e.g. ``await api.get("album", "1x2")``."""
        return await self._request(ResourceType(resource_type), identifier)


# Shared default client; resolves base URL and timeout from settings per call
api = MusicBingoApi()
