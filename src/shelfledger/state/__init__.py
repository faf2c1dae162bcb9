# ABOUTME: Public API for the world-state layer the registry reads and writes through.
# ABOUTME: Exports the WorldState protocol, its implementations, and the transaction context.

from shelfledger.state.context import TransactionContext
from shelfledger.state.memory import MemoryWorldState
from shelfledger.state.protocol import WorldState, WorldStateError
from shelfledger.state.sqlite import (
    DEFAULT_DB_PATH,
    SqliteWorldState,
    open_world_state,
    transaction,
)

__all__ = [
    "DEFAULT_DB_PATH",
    "MemoryWorldState",
    "SqliteWorldState",
    "TransactionContext",
    "WorldState",
    "WorldStateError",
    "open_world_state",
    "transaction",
]
