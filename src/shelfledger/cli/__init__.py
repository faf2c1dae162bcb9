# ABOUTME: CLI package for Shelfledger, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click

from shelfledger.cli.commands import (
    create_cmd,
    exists_cmd,
    init_cmd,
    ls_cmd,
    rm_cmd,
    show_cmd,
    transfer_cmd,
    update_cmd,
)


@click.group()
@click.version_option(package_name="shelfledger")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Shelfledger - a ledger-backed registry of library holdings."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(init_cmd.init)
cli.add_command(exists_cmd.exists)
cli.add_command(create_cmd.create)
cli.add_command(show_cmd.show)
cli.add_command(update_cmd.update)
cli.add_command(rm_cmd.rm)
cli.add_command(transfer_cmd.transfer)
cli.add_command(ls_cmd.ls)
