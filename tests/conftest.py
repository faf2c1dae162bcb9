# ABOUTME: Shared pytest fixtures for Shelfledger tests.
# ABOUTME: Provides in-memory and SQLite world states, transaction contexts, and a registry.

import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest

from shelfledger.registry import LibraryRegistry
from shelfledger.state import MemoryWorldState, TransactionContext, open_world_state


@pytest.fixture
def memory_state() -> MemoryWorldState:
    """An empty in-memory world state."""
    return MemoryWorldState()


@pytest.fixture
def ctx(memory_state: MemoryWorldState) -> TransactionContext:
    """A transaction context over the in-memory world state."""
    return TransactionContext(state=memory_state, tx_id="test-tx")


@pytest.fixture
def registry() -> LibraryRegistry:
    """A LibraryRegistry; it holds no state, so one per test is plenty."""
    return LibraryRegistry()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a not-yet-created world-state database."""
    return tmp_path / "world_state.db"


@pytest.fixture
def conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    """An open SQLite world-state connection, closed after the test."""
    connection = open_world_state(db_path)
    yield connection
    connection.close()
