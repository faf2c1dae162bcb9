# ABOUTME: Shared Click options for Shelfledger CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --db.

from pathlib import Path

import click

from shelfledger.state.sqlite import DEFAULT_DB_PATH

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Path to world-state database (default: {DEFAULT_DB_PATH})",
)
