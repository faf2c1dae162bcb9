# ABOUTME: The `shelfledger exists` command for checking whether a record is stored.
# ABOUTME: Absence is reported, not treated as an error.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfledger.cli.options import db_option
from shelfledger.cli.session import registry_session

console = Console()


@click.command("exists")
@click.argument("record_id")
@db_option
def exists(record_id: str, db_path: Path | None) -> None:
    """Report whether a record exists."""
    with registry_session(db_path, console) as (registry, ctx):
        found = registry.exists(ctx, record_id)

    if found:
        console.print(f"[green]{escape(record_id)} exists.[/green]")
    else:
        console.print(f"[yellow]{escape(record_id)} does not exist.[/yellow]")
