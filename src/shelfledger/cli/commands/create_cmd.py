# ABOUTME: The `shelfledger create` command for adding a new record.
# ABOUTME: Fails if a record with the same id is already stored.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfledger.cli.options import db_option
from shelfledger.cli.session import registry_session

console = Console()


@click.command("create")
@click.argument("record_id")
@click.argument("quantity", type=int)
@click.argument("owner")
@db_option
def create(record_id: str, quantity: int, owner: str, db_path: Path | None) -> None:
    """Create a record with a quantity and an owner."""
    with registry_session(db_path, console) as (registry, ctx):
        registry.create(ctx, record_id, quantity, owner)

    console.print(
        f"Created [bold]{escape(record_id)}[/bold]: {quantity} owned by "
        f"[cyan]{escape(owner)}[/cyan]."
    )
