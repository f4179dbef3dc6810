import json as _json
import logging
import sys
from typing import Any, Dict

from rich.console import Console
from rich.logging import RichHandler

APP_LOGGER = "musicbingo"
# Their DEBUG output would bury the client's one-line-per-request log
_PINNED_LOGGERS = ("aiohttp", "asyncio")


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return _json.dumps(payload, ensure_ascii=False)


def setup_logging(
    *, json_logs: bool = False, verbose: bool | None = None, quiet: bool | None = None
) -> None:
    """Configure logging for the CLI.

    The ``musicbingo`` logger follows the requested verbosity: DEBUG with
    ``verbose`` (one line per backend request and response), WARNING with
    ``quiet``, INFO otherwise. aiohttp and asyncio stay at WARNING either way.
    Records go to stderr, as JSON lines with ``json_logs`` or through rich
    otherwise; stdout is left for fetched JSON.
    """
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    if quiet:
        level = max(level, logging.WARNING)

    if json_logs:
        handler: logging.Handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(_JsonFormatter())
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(level)
    for name in _PINNED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
