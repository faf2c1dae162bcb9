# ABOUTME: In-memory WorldState backed by a plain dict.
# ABOUTME: Used by tests and embedders that supply their own persistence around it.

from collections.abc import Generator

from shelfledger.state.protocol import in_range


class MemoryWorldState:
    """Dict-backed world state.

    Scans iterate over a snapshot of the matching keys taken when iteration
    starts, so writes during a scan do not disturb it.
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def put(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def scan(self, start_key: str, end_key: str) -> Generator[tuple[str, bytes], None, None]:
        items = sorted(
            (k, v) for k, v in self._data.items() if in_range(k, start_key, end_key)
        )
        yield from items

    def __len__(self) -> int:
        return len(self._data)

    def snapshot(self) -> dict[str, bytes]:
        """Return a copy of the current key-value contents."""
        return dict(self._data)
