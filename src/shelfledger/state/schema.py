# ABOUTME: SQL DDL for the SQLite-backed world state.
# ABOUTME: A single key-value table; the key is the record id, the value its JSON bytes.

SCHEMA_V1 = """
CREATE TABLE world_state (
    key   TEXT PRIMARY KEY NOT NULL,
    value BLOB NOT NULL
) WITHOUT ROWID;
"""
