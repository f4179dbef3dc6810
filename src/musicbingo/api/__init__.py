"""Async client for the MusicBingo card backend."""

from .client import MusicBingoApi, api
from .request import ResourceRequest, ResourceType
from .schema import parse_resource

__all__ = [
    "MusicBingoApi",
    "ResourceRequest",
    "ResourceType",
    "api",
    "parse_resource",
]
