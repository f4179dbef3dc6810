"""
Typed request builder for MusicBingo backend resources.

A `ResourceRequest` pairs a resource type with an identifier, validates the
identifier up front and percent-encodes it as exactly one path segment.
"""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

from ..core.errors import InvalidInputError


class ResourceType(str, Enum):
    PLAYLIST = "playlist"
    ARTIST = "artist"
    ALBUM = "album"
    TRACK = "track"


def _check_identifier(resource_type: ResourceType, identifier) -> str:
    if not isinstance(identifier, str) or not identifier.strip():
        raise InvalidInputError(f"No {resource_type.value} id provided")
    # Dot segments would be collapsed by the server and hit another route
    if identifier in (".", ".."):
        raise InvalidInputError(f"Invalid {resource_type.value} id: {identifier!r}")
    return identifier


@dataclass(frozen=True)
class ResourceRequest:
    resource_type: ResourceType
    identifier: str

    def __post_init__(self):
        # Accept plain strings like "track" as well as the enum
        object.__setattr__(self, "resource_type", ResourceType(self.resource_type))
        _check_identifier(self.resource_type, self.identifier)

    @property
    def path(self) -> str:
        return f"/{self.resource_type.value}/{quote(self.identifier, safe='')}"

    def url(self, base_url: str) -> str:
        """Join this request onto `base_url` (origin plus path prefix)."""
        return f"{base_url.rstrip('/')}{self.path}"
