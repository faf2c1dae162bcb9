# ABOUTME: The `shelfledger update` command for replacing an existing record.
# ABOUTME: Overwrites both quantity and owner; nothing is merged.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfledger.cli.options import db_option
from shelfledger.cli.session import registry_session

console = Console()


@click.command("update")
@click.argument("record_id")
@click.argument("quantity", type=int)
@click.argument("owner")
@db_option
def update(record_id: str, quantity: int, owner: str, db_path: Path | None) -> None:
    """Replace a record's quantity and owner."""
    with registry_session(db_path, console) as (registry, ctx):
        registry.update(ctx, record_id, quantity, owner)

    console.print(
        f"Updated [bold]{escape(record_id)}[/bold]: {quantity} owned by "
        f"[cyan]{escape(owner)}[/cyan]."
    )
