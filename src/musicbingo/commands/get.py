"""
Fetch commands for MusicBingo (`mbingo get`).

Each sub-command fetches one resource from the card backend and prints the
JSON exactly as the server returned it.
"""

import asyncio
import json

import aiohttp
import typer
from rich.console import Console

from ..api.client import MusicBingoApi
from ..api.request import ResourceType
from ..core.errors import MusicBingoError
from ..i18n import t

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(no_args_is_help=True, help="Fetch playlists, artists, albums or tracks.")


def _fetch(resource_type: ResourceType, identifier: str, raw: bool) -> None:
    kind = resource_type.value

    async def _run():
        async with MusicBingoApi() as client:
            return await client.get(resource_type, identifier)

    err_console.print(f"[dim]{t('cli.fetching', kind=kind, id=identifier)}[/dim]")
    try:
        payload = asyncio.run(_run())
    except MusicBingoError as e:
        err_console.print(f"[red]{t('cli.fetch_failed', kind=kind, error=e)}[/red]")
        raise typer.Exit(1)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        err_console.print(f"[red]{t('errors.network')}[/red] {e}")
        raise typer.Exit(1)

    if raw:
        typer.echo(json.dumps(payload, ensure_ascii=False))
    else:
        console.print_json(data=payload)


_RAW_OPTION = typer.Option(False, "--raw", help="Print compact JSON without highlighting.")


@app.command("playlist")
def get_playlist(
    playlist_id: str = typer.Argument(..., help="Playlist id"),
    raw: bool = _RAW_OPTION,
):
    """Fetch a playlist."""
    _fetch(ResourceType.PLAYLIST, playlist_id, raw)


@app.command("artist")
def get_artist(
    artist_id: str = typer.Argument(..., help="Artist id"),
    raw: bool = _RAW_OPTION,
):
    """Fetch the album list of an artist."""
    _fetch(ResourceType.ARTIST, artist_id, raw)


@app.command("album")
def get_album(
    album_id: str = typer.Argument(..., help="Album id"),
    raw: bool = _RAW_OPTION,
):
    """Fetch an album."""
    _fetch(ResourceType.ALBUM, album_id, raw)


@app.command("track")
def get_track(
    track_id: str = typer.Argument(..., help="Track id"),
    raw: bool = _RAW_OPTION,
):
    """Fetch a track."""
    _fetch(ResourceType.TRACK, track_id, raw)
