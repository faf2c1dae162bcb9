# ABOUTME: WorldState protocol defining the key-value capability the registry consumes.
# ABOUTME: Any host store (in-memory, SQLite, a ledger peer) implements this contract.

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


class WorldStateError(Exception):
    """Raised by a world-state implementation when the underlying store fails."""


@runtime_checkable
class WorldState(Protocol):
    """Protocol for the host-managed key-value world state.

    Values are opaque bytes. get returns None for an absent key rather than
    raising. scan yields (key, value) pairs in ascending key order over the
    half-open range [start_key, end_key); an empty string for either bound
    leaves that side unbounded, so scan("", "") walks the whole namespace.
    The returned iterator must be closed by the caller when abandoned early.
    """

    def get(self, key: str) -> bytes | None: ...

    def put(self, key: str, value: bytes) -> None: ...

    def delete(self, key: str) -> None: ...

    def scan(self, start_key: str, end_key: str) -> Iterator[tuple[str, bytes]]: ...


def in_range(key: str, start_key: str, end_key: str) -> bool:
    """Whether key falls inside a scan range, honoring the empty-bound convention."""
    if start_key and key < start_key:
        return False
    if end_key and key >= end_key:
        return False
    return True
