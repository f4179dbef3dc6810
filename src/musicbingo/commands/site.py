"""Site metadata command (`mbingo site`)."""

import json

import typer
from rich.console import Console
from rich.table import Table

from ..core.website import WEBSITE
from ..i18n import t

console = Console()


def show_site(
    json_out: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
):
    """Show the static site metadata."""
    data = WEBSITE.as_dict()
    if json_out:
        typer.echo(json.dumps(data, ensure_ascii=False))
        return

    table = Table(title=t("cli.site_title"))
    table.add_column(t("cli.field"), style="cyan")
    table.add_column(t("cli.value"))
    for key, value in data.items():
        table.add_row(key, value)
    console.print(table)
