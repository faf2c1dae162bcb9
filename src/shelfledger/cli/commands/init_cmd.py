# ABOUTME: The `shelfledger init` command for seeding the world state.
# ABOUTME: Writes the bootstrap records, overwriting any with the same ids.

from pathlib import Path

import click
from rich.console import Console

from shelfledger.cli.options import db_option
from shelfledger.cli.session import registry_session
from shelfledger.registry.seed import SEED_RECORDS

console = Console()


@click.command("init")
@db_option
def init(db_path: Path | None) -> None:
    """Seed the world state with the bootstrap records."""
    with registry_session(db_path, console) as (registry, ctx):
        registry.bootstrap(ctx)

    console.print(f"Seeded [bold]{len(SEED_RECORDS)}[/bold] record(s).")
