# ABOUTME: Public API for the registry facade over the host world state.
# ABOUTME: Exports LibraryRegistry, the seed records, and the error taxonomy.

from shelfledger.registry.contract import LibraryRegistry
from shelfledger.registry.errors import (
    AlreadyExistsError,
    DeserializationError,
    NotFoundError,
    RegistryError,
    SerializationError,
    StoreReadError,
    StoreScanError,
    StoreWriteError,
)
from shelfledger.registry.seed import SEED_RECORDS

__all__ = [
    "SEED_RECORDS",
    "AlreadyExistsError",
    "DeserializationError",
    "LibraryRegistry",
    "NotFoundError",
    "RegistryError",
    "SerializationError",
    "StoreReadError",
    "StoreScanError",
    "StoreWriteError",
]
