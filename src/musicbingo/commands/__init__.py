"""Command groups for the MusicBingo CLI.

This package provides sub-apps that are mounted by musicbingo.cli.
"""

from . import config as config  # noqa: F401
from . import get as get  # noqa: F401
from . import site as site  # noqa: F401

__all__ = [
    "config",
    "get",
    "site",
]
