"""MusicBingo - async client and locale toolkit for the MusicBingo backend."""

__version__ = "0.1.0"
