# ABOUTME: The `shelfledger ls` command for listing every stored record.
# ABOUTME: Displays a Rich table, or the wire-format JSON objects with --json.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfledger.cli.options import db_option
from shelfledger.cli.session import registry_session
from shelfledger.records.codec import record_to_dict

console = Console()


@click.command("ls")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output records as JSON.",
)
@db_option
def ls(json_output: bool, db_path: Path | None) -> None:
    """List all records in the world state."""
    with registry_session(db_path, console) as (registry, ctx):
        records = registry.list_records(ctx)

    if json_output:
        click.echo(json_lib.dumps([record_to_dict(r) for r in records], indent=2))
        return

    if not records:
        console.print("[yellow]No records in the world state.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="bold")
    table.add_column("Owner")
    table.add_column("Quantity", justify="right")

    for record in records:
        table.add_row(escape(record.id), escape(record.owner), str(record.quantity))

    console.print(table)
    console.print(f"\n[dim]{len(records)} record(s)[/dim]")
