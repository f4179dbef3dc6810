# src/musicbingo/core/errors.py


class MusicBingoError(Exception):
    """Base application error for MusicBingo.

    Use this for predictable, user-facing error messages that should be
    caught by the CLI and displayed nicely.
    """

    pass


class InvalidInputError(MusicBingoError, ValueError):
    """A required resource identifier was missing or unusable."""

    pass


class FetchError(MusicBingoError):
    """The backend answered with a non-success HTTP status."""

    def __init__(self, resource_type: str, status: int, reason: str):
        self.resource_type = resource_type
        self.status = status
        self.reason = reason
        super().__init__(f"Error fetching {resource_type}: {reason}")


class ParseError(MusicBingoError):
    """The backend answered 2xx but the body was not the expected JSON."""

    def __init__(self, resource_type: str, detail: str):
        self.resource_type = resource_type
        self.detail = detail
        super().__init__(f"Error parsing {resource_type}: {detail}")
