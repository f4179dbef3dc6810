"""
Configuration commands for MusicBingo (`mbingo config`).
"""

import json

import typer
from rich.console import Console
from rich.table import Table

from ..core.config import get_settings
from ..i18n import catalog, t

console = Console()
app = typer.Typer(no_args_is_help=True, help="Inspect settings.")


@app.command("show")
def config_show(
    json_out: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
):
    """Show the effective settings and the active locale."""
    settings = get_settings()
    data = {
        "api": {
            "base_url": settings.api_base_url,
            "request_timeout": settings.request_timeout,
        },
        "locale": {
            "configured": settings.locale,
            "active": catalog.locale,
            "available": catalog.locales,
        },
    }
    if json_out:
        typer.echo(json.dumps(data))
        return

    table = Table(title=t("cli.settings_title"))
    table.add_column(t("cli.field"), style="cyan")
    table.add_column(t("cli.value"))
    table.add_row("api.base_url", settings.api_base_url)
    table.add_row("api.request_timeout", str(settings.request_timeout or "-"))
    table.add_row("locale.configured", settings.locale or "-")
    table.add_row("locale.active", catalog.locale or "-")
    table.add_row("locale.available", ", ".join(catalog.locales))
    console.print(table)
