"""
MusicBingo CLI - Main entry point using Typer.

This module configures the main Typer application, registers all command groups,
and defines global options like --version, --verbose and --lang.
"""

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.traceback import install

from .commands import config, get, site
from .core.config import get_settings
from .core.logging_util import setup_logging
from .i18n import set_locale, setup_locale

# Install a rich traceback handler for readable exceptions
install(show_locals=False)

console = Console(stderr=True)

app = typer.Typer(
    name="mbingo",
    help="🎵 MusicBingo - fetch cards from the MusicBingo backend.",
    epilog="Use `mbingo [COMMAND] --help` for more info on a specific command.",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

app.add_typer(get.app, name="get", help="🚀 Fetch playlists, artists, albums or tracks.")
app.add_typer(config.app, name="config", help="🔐 Inspect settings.")
app.command("site")(site.show_site)


def _show_version(value: bool):
    if value:
        from . import __version__

        typer.echo(f"MusicBingo v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the application version and exit.",
        callback=_show_version,
        is_eager=True,
    ),
    verbose: bool = typer.Option(None, "--verbose", help="Enable DEBUG-level logging."),
    quiet: bool = typer.Option(
        None, "--quiet", help="Reduce logging to warnings and errors."
    ),
    json_logs: bool = typer.Option(
        False, "--json-logs", help="Emit logs as JSON lines to stderr."
    ),
    lang: str = typer.Option(
        None, "--lang", help="Locale for messages (e.g. en, nl). Defaults to the environment."
    ),
):
    """
    MusicBingo CLI.
    """
    setup_logging(json_logs=json_logs, verbose=bool(verbose), quiet=bool(quiet))
    setup_locale()
    try:
        settings = get_settings()
    except ValidationError:
        # get_settings already reported the details
        raise typer.Exit(1)
    chosen = lang or settings.locale
    if chosen:
        set_locale(chosen)


def cli():
    """Main entry point for the console script defined in pyproject.toml."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]👋 Operation cancelled by user.[/yellow]")
        raise SystemExit(130)


if __name__ == "__main__":
    cli()
