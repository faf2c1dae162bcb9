# ABOUTME: SQLite-backed WorldState and the connection/transaction helpers around it.
# ABOUTME: Opens or creates the database, applies schema, and commits or rolls back per transaction.

import logging
import sqlite3
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from pathlib import Path

from shelfledger.state.context import TransactionContext
from shelfledger.state.protocol import WorldStateError
from shelfledger.state.schema import SCHEMA_V1

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".shelfledger" / "world_state.db"


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the schema has already been applied."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='world_state'"
    )
    return cursor.fetchone() is not None


def open_world_state(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the SQLite world-state database.

    Creates the database file and parent directories if they don't exist.
    Applies the schema on first creation. Sets WAL journal mode and
    sqlite3.Row factory for dict-like column access.

    Args:
        path: Path to the database file. Defaults to ~/.shelfledger/world_state.db.

    Returns:
        A configured sqlite3.Connection.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    if not _schema_exists(conn):
        conn.executescript(SCHEMA_V1)

    return conn


class SqliteWorldState:
    """WorldState over the world_state table of an open connection.

    Never commits on its own; the enclosing transaction() decides whether
    the writes made through it become durable.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def get(self, key: str) -> bytes | None:
        try:
            row = self._conn.execute(
                "SELECT value FROM world_state WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise WorldStateError(f"get {key!r} failed: {exc}") from exc
        return bytes(row["value"]) if row else None

    def put(self, key: str, value: bytes) -> None:
        try:
            self._conn.execute(
                "INSERT INTO world_state (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, sqlite3.Binary(value)),
            )
        except sqlite3.Error as exc:
            raise WorldStateError(f"put {key!r} failed: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._conn.execute("DELETE FROM world_state WHERE key = ?", (key,))
        except sqlite3.Error as exc:
            raise WorldStateError(f"delete {key!r} failed: {exc}") from exc

    def scan(self, start_key: str, end_key: str) -> Iterator[tuple[str, bytes]]:
        clauses = []
        params = []
        if start_key:
            clauses.append("key >= ?")
            params.append(start_key)
        if end_key:
            clauses.append("key < ?")
            params.append(end_key)
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        sql = f"SELECT key, value FROM world_state{where} ORDER BY key"
        return self._iter_rows(sql, params)

    def _iter_rows(self, sql: str, params: list[str]) -> Generator[tuple[str, bytes], None, None]:
        try:
            cursor = self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise WorldStateError(f"scan failed: {exc}") from exc
        try:
            while True:
                try:
                    row = cursor.fetchone()
                except sqlite3.Error as exc:
                    raise WorldStateError(f"scan failed: {exc}") from exc
                if row is None:
                    break
                yield row["key"], bytes(row["value"])
        finally:
            cursor.close()


@contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[TransactionContext, None, None]:
    """Run a block of registry operations as one host transaction.

    Commits when the block exits normally and rolls back when it raises,
    re-raising the original exception.
    """
    ctx = TransactionContext(state=SqliteWorldState(conn))
    logger.debug("tx %s: begin", ctx.tx_id)
    try:
        yield ctx
    except BaseException:
        try:
            conn.rollback()
        except sqlite3.Error:
            logger.exception("tx %s: rollback failed", ctx.tx_id)
        else:
            logger.debug("tx %s: rolled back", ctx.tx_id)
        raise
    conn.commit()
    logger.debug("tx %s: committed", ctx.tx_id)
