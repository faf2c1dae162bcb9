# ABOUTME: The `shelfledger rm` command for deleting a record.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfledger.cli.options import db_option
from shelfledger.cli.session import registry_session

console = Console()


@click.command("rm")
@click.argument("record_id")
@db_option
def rm(record_id: str, db_path: Path | None) -> None:
    """Delete a record."""
    with registry_session(db_path, console) as (registry, ctx):
        registry.delete(ctx, record_id)

    console.print(f"Deleted [bold]{escape(record_id)}[/bold].")
