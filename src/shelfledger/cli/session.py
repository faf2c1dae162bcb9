# ABOUTME: Runs one registry operation per CLI invocation inside a SQLite transaction.
# ABOUTME: Closes the connection on every path and turns registry errors into exit status 1.

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from shelfledger.registry import LibraryRegistry, RegistryError
from shelfledger.state.context import TransactionContext
from shelfledger.state.sqlite import DEFAULT_DB_PATH, open_world_state, transaction


@contextmanager
def registry_session(
    db_path: Path | None, console: Console
) -> Generator[tuple[LibraryRegistry, TransactionContext], None, None]:
    """Open the world state, begin a transaction, and yield the registry with its context.

    A RegistryError raised inside the block rolls the transaction back, is
    printed in red, and exits with status 1.
    """
    conn = open_world_state(db_path or DEFAULT_DB_PATH)
    try:
        with transaction(conn) as ctx:
            yield LibraryRegistry(), ctx
    except RegistryError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc
    finally:
        conn.close()
