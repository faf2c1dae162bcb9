# ABOUTME: The `shelfledger show` command for displaying one record.
# ABOUTME: Shows every field of a record looked up by id.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfledger.cli.options import db_option
from shelfledger.cli.session import registry_session

console = Console()


@click.command("show")
@click.argument("record_id")
@db_option
def show(record_id: str, db_path: Path | None) -> None:
    """Show a record by id."""
    with registry_session(db_path, console) as (registry, ctx):
        record = registry.read(ctx, record_id)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")

    table.add_row("ID", escape(record.id))
    table.add_row("Owner", escape(record.owner))
    table.add_row("Quantity", str(record.quantity))

    console.print(table)
