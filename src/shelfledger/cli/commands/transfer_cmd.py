# ABOUTME: The `shelfledger transfer` command for changing a record's owner.
# ABOUTME: Prints the previous owner returned by the registry alongside the new one.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfledger.cli.options import db_option
from shelfledger.cli.session import registry_session

console = Console()


@click.command("transfer")
@click.argument("record_id")
@click.argument("new_owner")
@db_option
def transfer(record_id: str, new_owner: str, db_path: Path | None) -> None:
    """Transfer a record to a new owner."""
    with registry_session(db_path, console) as (registry, ctx):
        old_owner = registry.transfer(ctx, record_id, new_owner)

    console.print(
        f"Transferred [bold]{escape(record_id)}[/bold] from "
        f"[cyan]{escape(old_owner)}[/cyan] to [cyan]{escape(new_owner)}[/cyan]."
    )
