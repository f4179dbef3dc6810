"""
Boundary schema for backend payloads.

The backend serves Spotify Web API shaped objects. The client returns them
as plain JSON; `parse_resource` is for callers that want typed models and
accept that a payload missing the common fields is rejected.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ..core.errors import ParseError
from .request import ResourceType


class _Resource(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = None
    uri: Optional[str] = None


class SimplifiedAlbum(_Resource):
    album_type: Optional[str] = None
    release_date: Optional[str] = None


class Album(SimplifiedAlbum):
    pass


class Playlist(_Resource):
    description: Optional[str] = None


class Track(_Resource):
    duration_ms: Optional[int] = None
    explicit: Optional[bool] = None


_ADAPTERS = {
    ResourceType.PLAYLIST: TypeAdapter(Playlist),
    ResourceType.ARTIST: TypeAdapter(List[SimplifiedAlbum]),
    ResourceType.ALBUM: TypeAdapter(Album),
    ResourceType.TRACK: TypeAdapter(Track),
}


def parse_resource(resource_type: ResourceType | str, payload: Any):
    """Validate `payload` and return it as typed model(s).

    Raises:
        ParseError: when the payload does not have the expected shape.
    """
    resource_type = ResourceType(resource_type)
    try:
        return _ADAPTERS[resource_type].validate_python(payload)
    except ValidationError as e:
        raise ParseError(
            resource_type.value, f"unexpected response shape ({e.error_count()} errors)"
        ) from e
